"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, field_validator, model_validator

from src.app.entities.reference.product import Product


def default_catalog() -> list[Product]:
    return [
        Product(id=1, name="HP Laptop", price=25000.0),
        Product(id=2, name="Dell Laptop", price=30000.0),
        Product(id=3, name="Lenevo Laptop", price=28000.0),
        Product(id=4, name="Sony Laptop", price=28000.0),
        Product(id=5, name="Apple Laptop", price=90000.0),
    ]


class AppConfig(BaseModel):
    """General application configuration."""

    name: str = Field(default="core-references", description="Application name")
    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Environment mode"
    )


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    colorize: bool = Field(default=True, description="Colorize log records")
    format: str = Field(
        default=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - "
            "<level>{message}</level>"
        ),
        description="Loguru format string",
    )

    @field_validator("level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


class PersonSample(BaseModel):
    """A person used by the ordering demonstrations."""

    first_name: str
    last_name: str
    hired_days_ago: int = Field(
        default=0, ge=0, description="Hire date offset from the reference clock"
    )


class CollectionsConfig(BaseModel):
    """Sample data for the collections demonstrations."""

    words: list[str] = Field(
        default=["pear", "fig", "banana", "apple", "fig", "kiwi", "apple"],
        description="Words with duplicates, used to fill lists and sets",
    )
    persons: list[PersonSample] = Field(
        default=[
            PersonSample(first_name="Ada", last_name="Lovelace", hired_days_ago=30),
            PersonSample(first_name="Alan", last_name="Turing", hired_days_ago=10),
            PersonSample(first_name="Grace", last_name="Hopper", hired_days_ago=20),
            PersonSample(first_name="Annie", last_name="Hopper", hired_days_ago=0),
        ]
    )
    queue_capacity: int = Field(
        default=2, ge=1, description="Capacity of the bounded queue demonstration"
    )


class FeaturesConfig(BaseModel):
    """Parameters of the functional features demonstrations."""

    time_zone: str = Field(default="Europe/Paris", description="Zone for zoned datetimes")
    anchor_date: date = Field(default=date(2018, 7, 29))
    anchor_time: time = Field(default=time(6, 30))
    fixed_now: datetime | None = Field(
        default=None,
        description="Reference clock; the current time is used when unset",
    )
    iterate_seed: int = Field(default=1)
    iterate_divisor: int = Field(default=5, ge=1)
    iterate_limit: int = Field(default=5, ge=0)
    price_filter_threshold: float = Field(default=30000.0)
    partition_threshold: float = Field(default=3000.0)
    integers: list[int] = Field(default=[5, 8, 1, 0, 6, 9])
    ints: list[int] = Field(default=[5, 8, 1, 0, 6, 9, 30, -4])
    sort_range: tuple[int, int] = Field(
        default=(0, 4), description="Half-open index range sorted in place"
    )
    catalog: list[Product] = Field(default_factory=default_catalog)

    @model_validator(mode="after")
    def _check_sort_range(self) -> FeaturesConfig:
        start, end = self.sort_range
        if not 0 <= start <= end <= len(self.ints):
            raise ValueError(
                f"sort_range {self.sort_range} is outside of ints (length {len(self.ints)})"
            )
        return self

    @model_validator(mode="after")
    def _check_catalog(self) -> FeaturesConfig:
        ids = [product.id for product in self.catalog]
        if len(ids) != len(set(ids)):
            logger.warning("Catalog contains duplicate product ids: {}", ids)
        return self


class ConfigData(BaseModel):
    """Root configuration model for config.yaml."""

    app: AppConfig = Field(default_factory=AppConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    collections: CollectionsConfig = Field(default_factory=CollectionsConfig)
    features: FeaturesConfig = Field(default_factory=FeaturesConfig)
