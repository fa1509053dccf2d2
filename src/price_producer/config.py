"""
Конфигурация консольного драйвера и загрузка сериализованных контрактов.

JSON сначала проверяется JSON Schema контрактом (форма, типы, границы),
затем разбирается Pydantic моделью (взаимные инварианты).
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field, field_validator

from price_producer.core.contracts import validate_price_limit, validate_producer_config
from price_producer.core.domain.price_limit import PriceLimit
from price_producer.pricer.limit_factory import DEFAULT_MARGIN_PCT


# =============================================================================
# PRODUCER CONFIG
# =============================================================================


class ProducerConfig(BaseModel):
    """
    Параметры одного прогона консольного драйвера.

    Не заданные spread и диапазон подбираются фабрикой (SpreadTable, margin_pct).
    Прогон по умолчанию — DEFAULT_PRODUCER_CONFIG.
    """

    # Начальная котировка и конверт
    bid: float = Field(default=120.1234, gt=0, description="Начальный bid")
    ask: float = Field(default=120.1238, gt=0, description="Начальный ask")
    spread: Optional[float] = Field(default=None, gt=0, description="Максимальный спред")
    spread_bps: Optional[float] = Field(default=None, gt=0, description="Спред в bps")
    min_inclusive: Optional[float] = Field(default=None, gt=0)
    max_inclusive: Optional[float] = Field(default=None, gt=0)
    margin_pct: float = Field(default=DEFAULT_MARGIN_PCT, ge=0, lt=1)

    # Генерация тиков
    ticks: int = Field(default=10, ge=0, description="Количество тиков")
    max_variation: float = Field(
        default=0.005, ge=0, description="Максимальный модуль delta одного тика"
    )
    bid_probability: float = Field(
        default=0.5, ge=0, le=1, description="Вероятность применить тик к bid"
    )
    seed: Optional[int] = Field(default=None, description="Seed генератора (None → случайный)")

    log_level: str = Field(default="INFO", description="Уровень логирования")

    model_config = {"frozen": True, "extra": "forbid"}  # Immutable

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Уровень логирования из стандартного набора logging"""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log_level: {v}")
        return level

    @field_validator("spread_bps")
    @classmethod
    def validate_single_spread(cls, v: Optional[float], info) -> Optional[float]:
        """spread и spread_bps взаимоисключающие"""
        if v is not None and info.data.get("spread") is not None:
            raise ValueError("Pass either spread or spread_bps, not both")
        return v


# Прогон по умолчанию: 120.1234/120.1238, spread 0.01, диапазон [119.8863, 121.4125],
# вариация до random() / 100 / 2
DEFAULT_PRODUCER_CONFIG = ProducerConfig(
    bid=120.1234,
    ask=120.1238,
    spread=0.01,
    min_inclusive=119.8863,
    max_inclusive=121.4125,
)


# =============================================================================
# LOADERS
# =============================================================================


def producer_config_from_dict(data: Dict[str, Any]) -> ProducerConfig:
    """
    Разбор конфигурации из dict.

    Ключи, отсутствующие в data, берутся из значений по умолчанию.

    Raises:
        jsonschema.ValidationError: Если data не соответствует контракту
        pydantic.ValidationError: Если нарушены инварианты модели
    """
    validate_producer_config(data)
    return ProducerConfig.model_validate(data)


def load_producer_config(path: Union[str, Path]) -> ProducerConfig:
    """
    Загрузка конфигурации драйвера из JSON файла.

    Raises:
        FileNotFoundError: Если файл не найден
        json.JSONDecodeError: Если файл не является валидным JSON
        jsonschema.ValidationError: Если данные не соответствуют контракту
        pydantic.ValidationError: Если нарушены инварианты модели
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return producer_config_from_dict(data)


def price_limit_from_dict(data: Dict[str, Any]) -> PriceLimit:
    """
    Разбор сериализованного PriceLimit.

    Raises:
        jsonschema.ValidationError: Если data не соответствует контракту
        pydantic.ValidationError: Если нарушены инварианты конверта
    """
    validate_price_limit(data)
    return PriceLimit.model_validate(data)


def load_price_limit(path: Union[str, Path]) -> PriceLimit:
    """Загрузка сериализованного PriceLimit из JSON файла."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return price_limit_from_dict(data)
