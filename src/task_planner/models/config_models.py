"""Configuration models for Task Planner."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class OutputConfig(BaseModel):
    """Output configuration."""

    format: Literal["table", "json", "yaml"] = Field(default="table")


class AppConfig(BaseModel):
    """Main Task Planner configuration."""

    database_path: str = Field(..., description="Path to the SQLite database file")
    log_level: str = Field(default="INFO", description="Log level for the file log")
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("database_path")
    @classmethod
    def validate_database_path(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("database_path cannot be empty")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level
