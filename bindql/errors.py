"""Custom exception hierarchy for bindQL.

All public errors inherit from BindQLError so callers can catch the base
class for any bindQL-specific failure.  Exceptions raised by user-supplied
predicates are never wrapped; they reach the caller unchanged.
"""
from __future__ import annotations

from typing import Any


class BindQLError(Exception):
    """Base exception for all bindQL errors.

    Args:
        message: Human-readable description.
        details: Extra context for diagnosing the failure.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details: dict[str, Any] = details or {}


class ConfigurationError(BindQLError):
    """Raised when a renderer or statement model is misconfigured.

    Detected at construction time, before any rendering is attempted.

    Args:
        message: Human-readable description.
        missing: Required inputs that were not supplied.
        details: Extra context.
    """

    def __init__(
        self,
        message: str,
        missing: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.missing = missing or []


class InternalConsistencyError(BindQLError):
    """Raised when rendering reaches a state that upstream construction
    should have made impossible.

    Examples are a mapping variant that is illegal for the statement kind
    being rendered, or two fragments contributing the same parameter key.
    Never retried: the same input always reproduces the failure.
    """


class DisallowedMappingError(InternalConsistencyError):
    """Raised when a visitor is handed a mapping variant it does not accept."""

    def __init__(self, kind: str, column: str | None, context: str) -> None:
        super().__init__(
            f"Mapping kind '{kind}' is not allowed in {context} statements "
            f"(column: {column!r}).",
            details={"kind": kind, "column": column, "context": context},
        )


class DuplicateParameterError(InternalConsistencyError):
    """Raised when a fragment collector sees the same parameter key twice."""

    def __init__(self, key: str, fragment: str) -> None:
        super().__init__(
            f"Parameter '{key}' was already collected; refusing to overwrite "
            f"it with the value bound by fragment {fragment!r}.",
            details={"key": key, "fragment": fragment},
        )


class PropertyAccessError(BindQLError):
    """Raised when a property path cannot be resolved against a row object.

    Args:
        path: The full dotted property path.
        segment: The segment that could not be resolved.
    """

    def __init__(self, path: str, segment: str) -> None:
        super().__init__(
            f"Cannot resolve property '{path}': no attribute or key '{segment}'.",
            details={"path": path, "segment": segment},
        )
        self.path = path
        self.segment = segment


class InvalidStatementError(BindQLError):
    """Raised when an update model has no set columns left once its
    conditional mappings are evaluated.

    Guards how the model was built: a model whose every mapping is
    conditional has no unconditional column to fall back on.
    """
