"""
EVM Normalization Exceptions - Custom exception hierarchy.

Every failure is raised synchronously at the point of conversion.
A failed conversion never produces a partial entity.
"""

from datetime import datetime, timezone
from typing import Any, Optional


class NormalizationError(Exception):
    """Base exception for all payload normalization errors."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        field_name: Optional[str] = None,
        raw_value: Optional[Any] = None,
        original_error: Optional[Exception] = None,
        context: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.source = source
        self.field_name = field_name
        self.raw_value = raw_value
        self.original_error = original_error
        self.context = context or {}
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "source": self.source,
            "field_name": self.field_name,
            "raw_value": str(self.raw_value)[:500] if self.raw_value is not None else None,
            "original_error": str(self.original_error) if self.original_error else None,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        parts = [f"{self.__class__.__name__}: {self.message}"]
        if self.source:
            parts.append(f"[source={self.source}]")
        if self.field_name:
            parts.append(f"[field={self.field_name}]")
        if self.original_error:
            parts.append(f"(caused by: {self.original_error})")
        return " ".join(parts)


class MalformedInputError(NormalizationError):
    """A required field is absent or has the wrong shape."""


class UnsupportedTransactionTypeError(NormalizationError):
    """Transaction type is not one of legacy (0), access-list (1) or dynamic-fee (2)."""

    def __init__(
        self,
        message: str,
        tx_type: Optional[Any] = None,
        source: Optional[str] = None,
        context: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message,
            source=source,
            field_name="type",
            raw_value=tx_type,
            context=context,
        )
        self.tx_type = tx_type

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = super().to_dict()
        data["tx_type"] = self.tx_type
        return data


class NumericOverflowError(NormalizationError):
    """Decoded value does not fit the representable range of its field."""

    def __init__(
        self,
        message: str,
        limit: int,
        source: Optional[str] = None,
        field_name: Optional[str] = None,
        raw_value: Optional[Any] = None,
        context: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message,
            source=source,
            field_name=field_name,
            raw_value=raw_value,
            context=context,
        )
        self.limit = limit

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = super().to_dict()
        data["limit"] = str(self.limit)
        return data


class AssetValueDecodeError(NormalizationError):
    """Transfer value could not be recovered from call data."""

    def __init__(
        self,
        message: str,
        asset_symbol: Optional[str] = None,
        raw_value: Optional[Any] = None,
        original_error: Optional[Exception] = None,
        context: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message,
            field_name="input",
            raw_value=raw_value,
            original_error=original_error,
            context=context,
        )
        self.asset_symbol = asset_symbol

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = super().to_dict()
        data["asset_symbol"] = self.asset_symbol
        return data


class ConfigurationError(NormalizationError):
    """Invalid normalizer configuration."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        raw_value: Optional[Any] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        super().__init__(
            message,
            raw_value=raw_value,
            original_error=original_error,
        )
        self.config_key = config_key

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = super().to_dict()
        data["config_key"] = self.config_key
        return data
