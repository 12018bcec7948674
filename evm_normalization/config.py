"""
EVM Normalization Configuration - Limits and naming policy.

Values can be overridden from environment variables (or a .env file)
through NormalizerConfig.from_env().
"""

import os
from dataclasses import dataclass
from typing import Any, Optional

from dotenv import load_dotenv

from evm_normalization.constants import (
    DEFAULT_TRANSACTION_TYPE,
    MAINNET_NETWORK_NAME,
    MAINNET_PROVIDER_ALIAS,
    MAX_SAFE_INTEGER,
)
from evm_normalization.exceptions import ConfigurationError
from evm_normalization.models import TransactionType


ENV_PREFIX = "EVM_NORMALIZER_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class NormalizerConfig:
    """Main configuration for payload normalization."""

    # Ceiling for heights, timestamps, nonces and v
    max_safe_integer: int = MAX_SAFE_INTEGER

    # Applied when a subscription transaction carries no "type" field
    default_transaction_type: TransactionType = DEFAULT_TRANSACTION_TYPE

    # Network naming for the provider library
    mainnet_network_name: str = MAINNET_NETWORK_NAME
    mainnet_provider_alias: str = MAINNET_PROVIDER_ALIAS

    # Logging
    log_payloads: bool = False

    def __post_init__(self) -> None:
        if self.max_safe_integer <= 0:
            raise ConfigurationError(
                message="max_safe_integer must be positive",
                config_key="max_safe_integer",
                raw_value=self.max_safe_integer,
            )
        self.default_transaction_type = TransactionType(self.default_transaction_type)

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "NormalizerConfig":
        """Build a configuration from EVM_NORMALIZER_* environment variables."""
        load_dotenv(dotenv_path)

        kwargs: dict[str, Any] = {}

        max_safe = os.environ.get(f"{ENV_PREFIX}MAX_SAFE_INTEGER")
        if max_safe:
            kwargs["max_safe_integer"] = _parse_int("MAX_SAFE_INTEGER", max_safe)

        default_type = os.environ.get(f"{ENV_PREFIX}DEFAULT_TX_TYPE")
        if default_type:
            value = _parse_int("DEFAULT_TX_TYPE", default_type)
            try:
                kwargs["default_transaction_type"] = TransactionType(value)
            except ValueError as e:
                raise ConfigurationError(
                    message=f"Unknown transaction type {value}",
                    config_key=f"{ENV_PREFIX}DEFAULT_TX_TYPE",
                    raw_value=default_type,
                    original_error=e,
                )

        mainnet_name = os.environ.get(f"{ENV_PREFIX}MAINNET_NAME")
        if mainnet_name:
            kwargs["mainnet_network_name"] = mainnet_name

        mainnet_alias = os.environ.get(f"{ENV_PREFIX}MAINNET_ALIAS")
        if mainnet_alias:
            kwargs["mainnet_provider_alias"] = mainnet_alias

        log_payloads = os.environ.get(f"{ENV_PREFIX}LOG_PAYLOADS")
        if log_payloads is not None:
            kwargs["log_payloads"] = _parse_bool("LOG_PAYLOADS", log_payloads)

        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {
            "max_safe_integer": self.max_safe_integer,
            "default_transaction_type": int(self.default_transaction_type),
            "mainnet_network_name": self.mainnet_network_name,
            "mainnet_provider_alias": self.mainnet_provider_alias,
            "log_payloads": self.log_payloads,
        }


def _parse_int(key: str, raw: str) -> int:
    try:
        return int(raw, 0)
    except ValueError as e:
        raise ConfigurationError(
            message=f"{ENV_PREFIX}{key} must be an integer",
            config_key=f"{ENV_PREFIX}{key}",
            raw_value=raw,
            original_error=e,
        )


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        message=f"{ENV_PREFIX}{key} must be a boolean",
        config_key=f"{ENV_PREFIX}{key}",
        raw_value=raw,
    )


# Default configuration instance
_default_config: Optional[NormalizerConfig] = None


def get_config() -> NormalizerConfig:
    """Get the default configuration."""
    global _default_config
    if _default_config is None:
        _default_config = NormalizerConfig()
    return _default_config


def set_config(config: Optional[NormalizerConfig]) -> None:
    """Set the default configuration (None restores built-in defaults)."""
    global _default_config
    _default_config = config
