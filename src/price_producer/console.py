"""
Console price producer.

Builds a PriceLimit around an initial quote and prints a stream of synthetic
ticks. The randomness lives here: the core only receives signed deltas.

Usage:
  python -m price_producer                         # default run: 120.1234/120.1238 in [119.8863, 121.4125]
  python -m price_producer --ticks 50 --seed 7
  python -m price_producer --config run.json       # see producer_config.json contract
  python -m price_producer --limit limit.json      # use a serialized PriceLimit, start from its bid/ask
"""

import argparse
import json
import logging
import random
import sys
from typing import Optional, Sequence, TextIO

import jsonschema
import pydantic

from price_producer.config import (
    DEFAULT_PRODUCER_CONFIG,
    ProducerConfig,
    load_price_limit,
    load_producer_config,
)
from price_producer.core.domain.price_limit import PriceLimit, Quote
from price_producer.pricer.pricer import Pricer, PricerConfig


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_LIMIT = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="price-producer",
        description="Generate synthetic bid/ask ticks within a validated price limit.",
    )
    parser.add_argument("--config", help="JSON file with producer settings")
    parser.add_argument("--limit", help="JSON file with a serialized PriceLimit")
    parser.add_argument("--ticks", type=int, help="number of ticks to emit")
    parser.add_argument("--seed", type=int, help="random seed for reproducible runs")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="logging level",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> ProducerConfig:
    """Config file (or defaults) with CLI overrides applied on top."""
    config = load_producer_config(args.config) if args.config else DEFAULT_PRODUCER_CONFIG
    overrides = {
        "ticks": args.ticks,
        "seed": args.seed,
        "log_level": args.log_level,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if not overrides:
        return config
    return ProducerConfig.model_validate({**config.model_dump(), **overrides})


def build_limit(pricer: Pricer, config: ProducerConfig) -> Optional[PriceLimit]:
    return pricer.set_price_limit(
        config.bid,
        config.ask,
        config.spread,
        config.min_inclusive,
        config.max_inclusive,
        spread_bps=config.spread_bps,
    )


def run(
    config: ProducerConfig,
    out: TextIO,
    limit: Optional[PriceLimit] = None,
) -> int:
    """
    Emit config.ticks quotes to `out`.

    Returns an exit code: EXIT_INVALID_LIMIT when no valid PriceLimit
    can be built from the config.
    """
    pricer = Pricer(PricerConfig(margin_pct=config.margin_pct))
    if limit is None:
        limit = build_limit(pricer, config)
    if limit is None:
        logger.error("Cannot build a price limit from bid=%s ask=%s", config.bid, config.ask)
        return EXIT_INVALID_LIMIT

    logger.info("Price limit: %s", json.dumps(limit.model_dump()))

    rng = random.Random(config.seed)
    deltas = (rng.uniform(-config.max_variation, config.max_variation) for _ in range(config.ticks))
    sides = (rng.random() < config.bid_probability for _ in range(config.ticks))

    quote = Quote(bid=config.bid, ask=config.ask)
    for tick in pricer.produce_ticks(quote, deltas, sides, limit):
        out.write(f"Next Tick - {tick.bid}, {tick.ask}\n")
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        config = resolve_config(args)
        limit = load_price_limit(args.limit) if args.limit else None
        if limit is not None and not args.config:
            # without --config the first quote is the limit's own bid/ask
            config = ProducerConfig.model_validate(
                {**config.model_dump(), "bid": limit.bid, "ask": limit.ask}
            )
    except (OSError, json.JSONDecodeError, jsonschema.ValidationError, pydantic.ValidationError) as e:
        print(f"price-producer: invalid input: {e}", file=sys.stderr)
        return EXIT_INVALID_LIMIT

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run(config, sys.stdout, limit=limit)


if __name__ == "__main__":
    sys.exit(main())
