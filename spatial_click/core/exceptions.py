"""Unified exception taxonomy.

Every domain exception inherits from ``SpatialClickError`` and carries
structured context fields so that failures during feature loading can be
logged and reported consistently.

Taxonomy categories
-------------------
- ``ValidationError``: input/configuration violations, never retryable.
- ``TransientError``: temporary failures (network, throttle), retryable.
- ``PermanentError``: unrecoverable failures, not retryable.

Hit resolution never raises: "no feature under the cursor" is a normal
outcome, reported as a ``RawCoordinate`` result rather than an error.
"""

from __future__ import annotations


class SpatialClickError(Exception):
    """Base exception for all spatial-click errors.

    Attributes:
        message: Human-readable error description.
        stage: Stage where the error occurred
            (e.g. ``"fetch"``, ``"normalize"``, ``"config"``).
        code: Machine-readable error code (e.g. ``"PROVIDER_FETCH_FAILED"``).
        retryable: Whether the operation could succeed if attempted again.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, TransientError):
            return "transient"
        if isinstance(self, PermanentError):
            return "permanent"
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(SpatialClickError):
    """Input or configuration validation failure. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class TransientError(SpatialClickError):
    """Temporary failure that may succeed on retry."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", True)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class PermanentError(SpatialClickError):
    """Unrecoverable failure. Not retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Ingestion
# ---------------------------------------------------------------------------


class IngestionError(PermanentError):
    """Raised when a provider payload as a whole cannot be normalized.

    Individual malformed records never raise; only a response that is
    not a sequence of records at all does.
    """

    default_stage = "normalize"
    default_code = "INGESTION_FAILED"
