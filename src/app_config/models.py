"""Pydantic models for rebalance calculator configuration with validation."""

import decimal
from typing import Literal
from pydantic import BaseModel, Field


RoundingMode = Literal[
    "ROUND_HALF_EVEN",
    "ROUND_HALF_UP",
    "ROUND_HALF_DOWN",
    "ROUND_UP",
    "ROUND_DOWN",
    "ROUND_CEILING",
    "ROUND_FLOOR",
    "ROUND_05UP",
]


class CalculationConfig(BaseModel):
    """Decimal arithmetic settings used by valuation and trade calculation."""

    precision: int = Field(
        default=28,
        ge=1,
        le=1000,
        description="Significant digits kept when dividing; sums and products are always exact"
    )
    rounding: RoundingMode = Field(
        default="ROUND_HALF_EVEN",
        description="Rounding mode applied when a result exceeds the configured precision"
    )

    def decimal_context(self) -> decimal.Context:
        """Build a fresh decimal context for these settings."""
        return decimal.Context(prec=self.precision, rounding=getattr(decimal, self.rounding))


class LoggingConfig(BaseModel):
    """Logging output settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root logger level"
    )
    format: Literal["text", "json"] = Field(
        default="text",
        description="text=human readable lines, json=one JSON object per record"
    )


class AppConfig(BaseModel):
    """Root configuration model."""

    calculation: CalculationConfig = Field(
        default_factory=CalculationConfig,
        description="Decimal arithmetic configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration"
    )
