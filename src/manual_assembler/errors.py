"""
Structured error types for the manual assembler.

Every failure the assembler can report is a ``ManualError`` carrying a
category, a context (manual directory, section, path) and the underlying
cause. Nothing is retried: the manual source is static local
content, so a failure means the tree or the configuration must be fixed.

Architecture:
    ::

        ┌───────────────────────────────────────────────────────┐
        │                      ManualError                       │
        │            (category, context, cause)                  │
        ├───────────────────────────────────────────────────────┤
        │  ManualSourceError   MalformedStemError   ConfigError  │
        │  (SOURCE)            (VALIDATION)         (CONFIG)     │
        │       │                                       │        │
        │  ManualNotFoundError               InvalidConfigError  │
        │                                                        │
        │  RenderError (RENDER)                                  │
        │       │                                                │
        │  RendererNotFoundError                                 │
        └───────────────────────────────────────────────────────┘

Usage:
    from manual_assembler.errors import ManualSourceError

    try:
        entries = list(path.iterdir())
    except OSError as e:
        raise ManualSourceError(f"Cannot list {path}", cause=e)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error categories for reporting."""

    SOURCE = "SOURCE"
    VALIDATION = "VALIDATION"
    CONFIG = "CONFIG"
    RENDER = "RENDER"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Only set what's relevant; ``to_dict()`` drops unset fields so the
    result can go straight into a log event.
    """

    manual_dir: str | None = None
    section: str | None = None
    path: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["manual_dir", "section", "path"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class ManualError(Exception):
    """Base exception for all manual assembler errors."""

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> ManualError:
        """
        Add context to this error (fluent API).

        Usage:
            raise ManualSourceError("Unreadable").with_context(
                section="1_basics",
                path="docs/manual/1_basics",
            )
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, None if value is None else str(value))
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# SOURCE ERRORS
# =============================================================================


class ManualSourceError(ManualError):
    """
    The manual source tree could not be read.

    Raised for the root listing and for every section listing. Always
    fatal: assembly is aborted and no partial output is returned.
    """

    default_category = ErrorCategory.SOURCE


class ManualNotFoundError(ManualSourceError):
    """The manual root directory does not exist."""

    def __init__(self, manual_dir: Any, *, cause: Exception | None = None):
        super().__init__(
            f"Manual directory not found: {manual_dir}",
            context=ErrorContext(manual_dir=str(manual_dir)),
            cause=cause,
        )


# =============================================================================
# VALIDATION ERRORS
# =============================================================================


class MalformedStemError(ManualError):
    """A section or item name cannot be decoded.

    The stem is empty or has no alphabetic character after its kind-char.
    This is a defect in the manual source tree.
    """

    default_category = ErrorCategory.VALIDATION

    def __init__(self, stem: str, message: str | None = None, **kwargs: Any):
        self.stem = stem
        super().__init__(message or f"Cannot decode manual entry name: {stem!r}", **kwargs)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["stem"] = self.stem
        return result


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(ManualError):
    """Configuration error."""

    default_category = ErrorCategory.CONFIG


class InvalidConfigError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: Any, message: str | None = None):
        self.key = key
        self.value = value
        super().__init__(message or f"Invalid configuration for {key}: {value!r}")


# =============================================================================
# RENDER ERRORS
# =============================================================================


class RenderError(ManualError):
    """A renderer failed to produce its output."""

    default_category = ErrorCategory.RENDER


class RendererNotFoundError(RenderError):
    """No renderer is registered for the requested format."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown output format: {name}")


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "ManualError",
    "ManualSourceError",
    "ManualNotFoundError",
    "MalformedStemError",
    "ConfigError",
    "InvalidConfigError",
    "RenderError",
    "RendererNotFoundError",
]
