"""
Extensions Configuration

Configuration constants for the string, date and collection helpers.
Defines the defaults every helper falls back to when the caller does not
pass an explicit value.

Business Context:
    - Masking keeps the last 4 characters visible ("******7890")
    - Email validation must never hang on pathological input, so pattern
      matching is bounded by a short deadline
    - Locale-aware formatting needs a default culture when none is supplied

Design Principles:
    - Configuration as code with optional environment overrides
    - Type-safe constants
    - Immutable config object
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Final

from dotenv import load_dotenv


# ============================================================================
# MASKING DEFAULTS
# ============================================================================

DEFAULT_UNMASKED_COUNT: Final[int] = 4  # Characters left visible at the end
DEFAULT_MASK_CHAR: Final[str] = "*"


# ============================================================================
# PATTERN MATCHING DEADLINES
# ============================================================================

# Upper bound for the email grammar match (anti catastrophic backtracking)
EMAIL_MATCH_TIMEOUT_MS: Final[int] = 250


# ============================================================================
# FORMATTING DEFAULTS
# ============================================================================

DEFAULT_LOCALE: Final[str] = "en_US"
DEFAULT_NUMBER_DECIMALS: Final[int] = 2  # "{0:N}" behaves like "{0:N2}"
DEFAULT_PERCENT_DECIMALS: Final[int] = 0  # "{0:P}" behaves like "{0:P0}"


# ============================================================================
# RANDOM STRINGS AND INTEGER PARSING
# ============================================================================

RANDOM_ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

# Best-effort integer parsing keeps the signed 32-bit contract
INT32_MAX: Final[int] = 2**31 - 1


# ============================================================================
# CONFIG OBJECT
# ============================================================================


@dataclass(frozen=True)
class ExtensionsConfig:
    """
    Complete configuration for the extension helpers.

    Encapsulates all tunable values in a single immutable object.

    Mask defaults (4, "*") are fixed module constants and intentionally
    not part of this object.

    Attributes:
        default_locale: Culture used by format_with() when no provider is given ("en_US")
        email_match_timeout_ms: Deadline for the email grammar match (250)

    Usage:
        config = ExtensionsConfig.default()
        config = ExtensionsConfig.from_env()
    """

    default_locale: str = DEFAULT_LOCALE
    email_match_timeout_ms: int = EMAIL_MATCH_TIMEOUT_MS

    def __post_init__(self) -> None:
        """Validate value ranges"""
        if self.email_match_timeout_ms <= 0:
            raise ValueError(
                f"email_match_timeout_ms must be positive, got {self.email_match_timeout_ms}"
            )
        if not self.default_locale:
            raise ValueError("default_locale cannot be empty")

    @classmethod
    def default(cls) -> "ExtensionsConfig":
        """Get default configuration from module constants"""
        return cls()

    @classmethod
    def from_env(cls) -> "ExtensionsConfig":
        """
        Build configuration from environment variables.

        Loads a .env file first (if present), then reads:
            EXTENSIONS_DEFAULT_LOCALE
            EXTENSIONS_EMAIL_MATCH_TIMEOUT_MS

        Missing variables fall back to module constants.

        Returns:
            ExtensionsConfig instance

        Raises:
            ValueError: If a variable holds an invalid value
        """
        load_dotenv()

        return cls(
            default_locale=os.getenv("EXTENSIONS_DEFAULT_LOCALE", DEFAULT_LOCALE),
            email_match_timeout_ms=int(
                os.getenv("EXTENSIONS_EMAIL_MATCH_TIMEOUT_MS", str(EMAIL_MATCH_TIMEOUT_MS))
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization/logging"""
        return {
            "default_locale": self.default_locale,
            "email_match_timeout_ms": self.email_match_timeout_ms,
        }


@lru_cache(maxsize=1)
def get_config() -> ExtensionsConfig:
    """
    Get process-wide configuration (read once from environment).

    Call get_config.cache_clear() to force a re-read, e.g. in tests.

    Returns:
        ExtensionsConfig instance
    """
    return ExtensionsConfig.from_env()
