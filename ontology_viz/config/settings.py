from __future__ import annotations

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from rdflib.namespace import RDFS

from ontology_viz.errors import UnsupportedFormatError
from ontology_viz.graph.schema import RdfFormat

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
        env_prefix="ONTOVIZ_",
    )

    # ------------------------------------------------------------------
    # Graph building / sampling
    # ------------------------------------------------------------------
    batch_size: int = Field(
        default=500,
        gt=0,
        description=(
            "Triples processed per accumulation step. Bounds peak working set; "
            "does not change the resulting graph."
        ),
    )

    max_nodes_default: int = Field(
        default=500,
        ge=0,
        description="Node cap applied when a request does not pass maxNodes.",
    )

    default_format: str = Field(
        default="turtle",
        description="Serialization assumed when none is given.",
    )

    label_property: str = Field(
        default=str(RDFS.label),
        description=(
            "Property looked up for human-readable labels in neighborhood "
            "queries. Falls back to the URI fragment heuristic."
        ),
    )

    # ------------------------------------------------------------------
    # Web / logging
    # ------------------------------------------------------------------
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"],
        description="Origins allowed to call the HTTP API (development frontends).",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level used by the web app and CLI.",
    )

    @field_validator("default_format")
    @classmethod
    def _known_format(cls, value: str) -> str:
        try:
            RdfFormat.from_name(value)
        except UnsupportedFormatError as exc:
            raise ValueError(str(exc)) from exc
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"Unknown log level: {value}. Expected one of: {', '.join(_LOG_LEVELS)}"
            )
        return level


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Singleton-style accessor so Settings is only constructed once.

    Tests that change environment variables call reset_settings() first.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
