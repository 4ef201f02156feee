from __future__ import annotations

from typing import Any


class TraceChainError(Exception):
    """Base exception for all tracechain errors.

    Attributes:
        code: Optional machine-readable error code (e.g. ``"EXPORTER_INIT"``).
        details: Arbitrary key/value context about the error.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class ConfigError(TraceChainError): ...


class UnsupportedExporterKind(ConfigError):
    """The configured exporter kind is not one of the recognised backends."""

    def __init__(self, kind: str) -> None:
        super().__init__(
            f"unsupported exporter: {kind}",
            code="UNSUPPORTED_EXPORTER",
            details={"kind": kind},
        )
        self.kind = kind


class ExporterInitError(TraceChainError):
    """A backend exporter could not be constructed.

    The underlying failure is chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        kind: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code="EXPORTER_INIT", details=details)
        self.kind = kind
