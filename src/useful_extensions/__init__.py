"""
useful_extensions

Helper functions layered on strings, datetimes and iterables.

This module is the main entry point and re-exports the public interface.

Usage:
    >>> from useful_extensions import mask, end_of_month, flatten
    >>>
    >>> # Or import from specific submodules
    >>> from useful_extensions.shared.utils.strings import is_email
    >>> from useful_extensions.shared.utils.dates import next_weekday
"""

from .application.models import DateTimeKind, MaskOptions, Weekday
from .application.ports import PagedQuerySource
from .domain.extensions_config import ExtensionsConfig, get_config
from .domain.shared.exceptions import (
    CultureNotFoundError,
    ExtensionsException,
    FormatError,
    NullArgumentError,
)
from .shared.utils.collections import fetch_all_pages, flatten, is_in
from .shared.utils.dates import (
    TICK,
    add_months,
    add_weeks,
    beginning_of_day,
    beginning_of_hour,
    beginning_of_month,
    beginning_of_year,
    day_of_week_occurrence,
    end_of_day,
    end_of_hour,
    end_of_month,
    end_of_year,
    is_weekend,
    kind_of,
    month_dates,
    month_dates_for,
    next_weekday,
    nth_weekday_of_month,
    previous_weekday,
)
from .shared.utils.strings import (
    append_with,
    format_with,
    hash_text,
    is_email,
    is_empty,
    is_not_empty,
    is_web_url,
    mask,
    or_default,
    random_string,
    regex_match,
    remove_alpha_chars,
    remove_chars,
    remove_special_chars,
    resolve_locale,
    to_currency,
    to_int,
)

__version__ = "1.0.0"

__all__ = [
    # Models
    "DateTimeKind",
    "MaskOptions",
    "Weekday",
    "PagedQuerySource",
    # Configuration
    "ExtensionsConfig",
    "get_config",
    # Exceptions
    "ExtensionsException",
    "NullArgumentError",
    "FormatError",
    "CultureNotFoundError",
    # Strings
    "append_with",
    "format_with",
    "hash_text",
    "is_email",
    "is_empty",
    "is_not_empty",
    "is_web_url",
    "mask",
    "or_default",
    "random_string",
    "regex_match",
    "remove_alpha_chars",
    "remove_chars",
    "remove_special_chars",
    "resolve_locale",
    "to_currency",
    "to_int",
    # Dates
    "TICK",
    "add_months",
    "add_weeks",
    "beginning_of_day",
    "beginning_of_hour",
    "beginning_of_month",
    "beginning_of_year",
    "day_of_week_occurrence",
    "end_of_day",
    "end_of_hour",
    "end_of_month",
    "end_of_year",
    "is_weekend",
    "kind_of",
    "month_dates",
    "month_dates_for",
    "next_weekday",
    "nth_weekday_of_month",
    "previous_weekday",
    # Collections
    "fetch_all_pages",
    "flatten",
    "is_in",
]
