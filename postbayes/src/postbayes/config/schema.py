"""Pydantic models describing the postbayes runtime configuration."""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class CsvSettings(BaseModel):
    """Column names and dialect of training and test CSV files."""

    model_config = ConfigDict(extra="forbid")

    label_field: str = Field(default="tag", min_length=1)
    content_field: str = Field(default="content", min_length=1)
    delimiter: str = ","

    @field_validator("delimiter")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("delimiter must be exactly one character")
        return value

    @model_validator(mode="after")
    def _distinct_fields(self) -> "CsvSettings":
        if self.label_field == self.content_field:
            raise ValueError("label_field and content_field must differ")
        return self


class ReportSettings(BaseModel):
    """Console report rendering options."""

    model_config = ConfigDict(extra="forbid")

    precision: int = Field(default=3, ge=1, le=17)
    show_training_data: bool = True


class LoggingSettings(BaseModel):
    """Threshold and destination of JSON diagnostics."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = "WARN"
    stream: Literal["stderr", "stdout"] = "stderr"

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.upper()
            return "WARN" if value == "WARNING" else value
        return value


class RuntimeConfig(BaseModel):
    """Root configuration loaded from ``postbayes.yaml``."""

    model_config = ConfigDict(extra="forbid")

    version: int = 1
    csv: CsvSettings = Field(default_factory=CsvSettings)
    report: ReportSettings = Field(default_factory=ReportSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
