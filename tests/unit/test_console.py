"""
Tests for the console price producer.

Проверяет:
- Поток тиков в выходной поток и соблюдение bid < ask
- Воспроизводимость при фиксированном seed
- Код выхода при невалидном конверте и невалидной конфигурации
- Разбор аргументов командной строки
"""

import io
import json
from pathlib import Path

import pytest

from price_producer.config import DEFAULT_PRODUCER_CONFIG, ProducerConfig
from price_producer.console import EXIT_INVALID_LIMIT, EXIT_OK, main, run
from price_producer.core.domain import PriceLimit


def _parse_ticks(text: str) -> list[tuple[float, float]]:
    ticks = []
    for line in text.splitlines():
        assert line.startswith("Next Tick - ")
        bid, ask = line[len("Next Tick - "):].split(", ")
        ticks.append((float(bid), float(ask)))
    return ticks


class TestRun:
    """run(config, out)"""

    def test_emits_requested_ticks(self) -> None:
        out = io.StringIO()
        assert run(DEFAULT_PRODUCER_CONFIG.model_copy(update={"ticks": 5, "seed": 1}), out) == EXIT_OK
        ticks = _parse_ticks(out.getvalue())
        assert len(ticks) == 5
        for bid, ask in ticks:
            assert bid < ask

    def test_same_seed_same_output(self) -> None:
        first, second = io.StringIO(), io.StringIO()
        run(DEFAULT_PRODUCER_CONFIG.model_copy(update={"ticks": 20, "seed": 7}), first)
        run(DEFAULT_PRODUCER_CONFIG.model_copy(update={"ticks": 20, "seed": 7}), second)
        assert first.getvalue() == second.getvalue()

    def test_zero_ticks(self) -> None:
        out = io.StringIO()
        assert run(ProducerConfig(ticks=0), out) == EXIT_OK
        assert out.getvalue() == ""

    def test_bid_only_ticks_move_bid(self) -> None:
        out = io.StringIO()
        config = DEFAULT_PRODUCER_CONFIG.model_copy(
            update={"ticks": 3, "seed": 3, "bid_probability": 1.0}
        )
        run(config, out)
        ticks = _parse_ticks(out.getvalue())
        assert len(ticks) == 3
        assert ticks[0][0] != 120.1234

    def test_invalid_limit(self) -> None:
        out = io.StringIO()
        config = ProducerConfig(bid=101.0, ask=100.0, spread=1.0, min_inclusive=99, max_inclusive=102)
        assert run(config, out) == EXIT_INVALID_LIMIT
        assert out.getvalue() == ""

    def test_explicit_limit_used(self) -> None:
        limit = PriceLimit(bid=100, ask=101, spread=5, min_inclusive=99, max_inclusive=102)
        out = io.StringIO()
        config = ProducerConfig(bid=100, ask=101, ticks=30, seed=11, max_variation=10.0)
        assert run(config, out, limit=limit) == EXIT_OK
        for bid, ask in _parse_ticks(out.getvalue()):
            assert bid < ask
            assert ask - bid <= 5 + 1e-9


class TestMain:
    """main(argv)"""

    def test_defaults(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["--ticks", "3", "--seed", "5"]) == EXIT_OK
        assert len(_parse_ticks(capsys.readouterr().out)) == 3

    def test_config_file(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        path = tmp_path / "run.json"
        path.write_text(
            json.dumps({"bid": 1.1234, "ask": 1.1236, "spread": 0.0003, "ticks": 4, "seed": 1}),
            encoding="utf-8",
        )
        assert main(["--config", str(path)]) == EXIT_OK
        ticks = _parse_ticks(capsys.readouterr().out)
        assert len(ticks) == 4

    def test_cli_overrides_config(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        path = tmp_path / "run.json"
        path.write_text(json.dumps({"bid": 1.1234, "ask": 1.1236, "ticks": 4}), encoding="utf-8")
        assert main(["--config", str(path), "--ticks", "2"]) == EXIT_OK
        assert len(_parse_ticks(capsys.readouterr().out)) == 2

    def test_limit_file(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        path = tmp_path / "limit.json"
        path.write_text(
            json.dumps(
                {"bid": 120.0, "ask": 120.5, "spread": 1.0, "min_inclusive": 119.0, "max_inclusive": 122.0}
            ),
            encoding="utf-8",
        )
        assert main(["--limit", str(path), "--ticks", "2", "--seed", "9"]) == EXIT_OK
        assert len(_parse_ticks(capsys.readouterr().out)) == 2

    def test_limit_file_sets_starting_quote(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        path = tmp_path / "limit.json"
        path.write_text(
            json.dumps(
                {"bid": 1.1234, "ask": 1.1236, "spread": 0.0003, "min_inclusive": 1.1, "max_inclusive": 1.3}
            ),
            encoding="utf-8",
        )
        assert main(["--limit", str(path), "--ticks", "1", "--seed", "1"]) == EXIT_OK
        [(bid, ask)] = _parse_ticks(capsys.readouterr().out)
        # Один тик сдвигает котировку не более чем на max_variation и spread
        assert abs(bid - 1.1234) <= 0.005 + 0.0003
        assert abs(ask - 1.1236) <= 0.005 + 0.0003
        assert bid < ask

    def test_invalid_config_file(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        path = tmp_path / "run.json"
        path.write_text(json.dumps({"bid": -1.0, "ask": 1.0}), encoding="utf-8")
        assert main(["--config", str(path)]) == EXIT_INVALID_LIMIT
        assert "invalid input" in capsys.readouterr().err

    def test_missing_config_file(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        assert main(["--config", str(tmp_path / "missing.json")]) == EXIT_INVALID_LIMIT
        assert "invalid input" in capsys.readouterr().err

    def test_unknown_log_level_rejected_by_argparse(self) -> None:
        with pytest.raises(SystemExit):
            main(["--log-level", "VERBOSE"])
