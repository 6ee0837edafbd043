"""Data contract for review results handed to the report templates."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_RUNTIME_NAME = "dangerJS"
DEFAULT_RUNTIME_HREF = "https://danger.systems/js"


class Violation(BaseModel):
    """A single reported finding with an optional source location."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    message: str = ""
    file: str | None = None
    line: int | None = Field(default=None, ge=1)
    icon: str | None = None

    @field_validator("message", mode="before")
    @classmethod
    def coerce_missing_message(cls, value: object) -> object:
        """Treat a null message as empty text."""
        return "" if value is None else value

    @property
    def is_inline(self) -> bool:
        """Whether the violation points at a specific file and line."""
        return is_inline(self)


def is_inline(violation: Violation) -> bool:
    """Return True when both file and line are present."""
    return violation.file is not None and violation.line is not None


class RuntimeMeta(BaseModel):
    """Identifies the tool that produced a set of results."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    runtime_name: str = Field(alias="runtimeName", min_length=1)
    runtime_href: str = Field(alias="runtimeHref", min_length=1)


DEFAULT_RUNTIME_META = RuntimeMeta(
    runtime_name=DEFAULT_RUNTIME_NAME,
    runtime_href=DEFAULT_RUNTIME_HREF,
)


class DangerResults(BaseModel):
    """Failures, warnings, messages and markdown notes from one review run."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    fails: tuple[Violation, ...] = ()
    warnings: tuple[Violation, ...] = ()
    messages: tuple[Violation, ...] = ()
    markdowns: tuple[Violation, ...] = ()
    meta: RuntimeMeta | None = None

    @field_validator("fails", "warnings", "messages", "markdowns", mode="before")
    @classmethod
    def coerce_missing_list(cls, value: object) -> object:
        """Treat a null violation list as empty."""
        return () if value is None else value

    @field_validator("meta", mode="before")
    @classmethod
    def drop_malformed_meta(cls, value: Any) -> Any:
        """Discard meta payloads that cannot describe a runtime."""
        if value is None or isinstance(value, RuntimeMeta):
            return value
        if not isinstance(value, dict):
            return None
        try:
            return RuntimeMeta.model_validate(value)
        except ValueError:
            return None

    def resolved_meta(self) -> RuntimeMeta:
        """Return the runtime meta, falling back to the dangerJS defaults."""
        return self.meta or DEFAULT_RUNTIME_META
