"""
Shared Models

Responsibility:
    Enums and option models shared by the utility groups.
    Prevents circular dependencies between strings/dates/collections.

Contains:
    - Weekday: Day-of-week enum aligned with datetime.weekday()
    - DateTimeKind: Local/UTC/unspecified classification of a datetime
    - MaskOptions: Validated options for strings.mask()
"""

from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from useful_extensions.domain.extensions_config import (
    DEFAULT_MASK_CHAR,
    DEFAULT_UNMASKED_COUNT,
)


class Weekday(IntEnum):
    """
    Day of the week.

    Values follow datetime.weekday() (Monday is 0), so a Weekday can be
    compared directly with value.weekday() and plain ints are accepted
    wherever a Weekday is expected.

    Usage:
        >>> from datetime import datetime
        >>> Weekday(datetime(2024, 3, 15).weekday())
        <Weekday.FRIDAY: 4>
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class DateTimeKind(str, Enum):
    """
    Kind of a datetime value.

    Derived from tzinfo: naive values are UNSPECIFIED, values whose tzinfo
    has a zero offset and reports itself as UTC are UTC, anything else
    carrying a tzinfo is LOCAL. Date helpers keep tzinfo untouched, so the
    kind of a derived value always equals the kind of its input.

    Attributes:
        UNSPECIFIED: Naive datetime (no tzinfo)
        UTC: datetime with UTC tzinfo
        LOCAL: datetime with any other tzinfo
    """

    UNSPECIFIED = "unspecified"
    UTC = "utc"
    LOCAL = "local"


class MaskOptions(BaseModel):
    """
    Options for masking a string.

    Attributes:
        unmasked_count: Number of trailing characters left visible (default 4)
        mask_char: Single replacement character (default "*")

    Validation:
        - unmasked_count must be >= 0
        - mask_char must be exactly one character

    Examples:
        >>> MaskOptions()
        MaskOptions(unmasked_count=4, mask_char='*')
        >>> MaskOptions(unmasked_count=2, mask_char="#").mask_char
        '#'
    """

    model_config = ConfigDict(frozen=True)

    unmasked_count: int = Field(
        default=DEFAULT_UNMASKED_COUNT,
        ge=0,
        description="Trailing characters left unmasked",
    )
    mask_char: str = Field(
        default=DEFAULT_MASK_CHAR, description="Character used as the mask"
    )

    @field_validator("mask_char")
    @classmethod
    def validate_mask_char(cls, value: str) -> str:
        """
        Validate that mask_char is a single character.

        Args:
            value: mask_char to validate

        Returns:
            Validated mask_char

        Raises:
            ValueError: If value is empty or longer than one character
        """
        if len(value) != 1:
            raise ValueError(f"mask_char must be a single character, got {value!r}")
        return value
