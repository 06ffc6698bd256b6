"""
String Utilities

Responsibility:
    Free functions operating on str: emptiness checks, composite formatting,
    masking, character filtering, URL/email validation, hashing, random
    strings and currency formatting.

Error Policy:
    Strict helpers raise an ExtensionsException subclass on invalid input:
        format_with, append_with, hash_text, to_currency (and mask on invalid options)
    Best-effort helpers never raise for bad data and return a safe default:
        to_int / remove_alpha_chars -> 0
        remove_chars / remove_special_chars -> ""
        is_email / is_web_url / regex_match (on timeout) -> False

Architecture Notes:
    - Stateless: no module-level mutable state
    - Locale data comes from babel (CLDR); IDNA from idna; timed regex from regex
"""

import hashlib
import logging
import random
import string
from decimal import Decimal
from typing import Any, Iterable, Optional, Union
from urllib.parse import urlsplit

import idna
import regex
from babel import Locale, UnknownLocaleError
from babel.numbers import (
    format_currency,
    format_decimal,
    format_percent,
    get_decimal_symbol,
    get_territory_currencies,
)

from useful_extensions.application.models import MaskOptions
from useful_extensions.domain.extensions_config import (
    DEFAULT_MASK_CHAR,
    DEFAULT_NUMBER_DECIMALS,
    DEFAULT_PERCENT_DECIMALS,
    DEFAULT_UNMASKED_COUNT,
    INT32_MAX,
    RANDOM_ALPHABET,
    get_config,
)
from useful_extensions.domain.patterns import (
    EMAIL_PATTERN,
    NON_ALPHANUMERIC_PATTERN,
    NON_DIGIT_PATTERN,
)
from useful_extensions.domain.shared.exceptions import (
    CultureNotFoundError,
    FormatError,
    NullArgumentError,
)

logger = logging.getLogger(__name__)

WEB_URL_SCHEMES = frozenset({"http", "https"})

# Standard numeric format codes handled with locale conventions: C, N2, P1, ...
_STANDARD_NUMERIC_SPEC = regex.compile(r"([CNP])(\d{0,2})", regex.IGNORECASE)

LocaleLike = Union[str, Locale]


# ============================================================================
# EMPTINESS
# ============================================================================


def is_empty(text: Optional[str]) -> bool:
    """Return True if text is None or ""."""
    return not text


def is_not_empty(text: Optional[str]) -> bool:
    """Return True if text has at least one character."""
    return not is_empty(text)


def or_default(text: Optional[str], fallback: Optional[str]) -> Optional[str]:
    """
    Return text if it is non-empty, otherwise fallback.

    Examples:
        >>> or_default("", "n/a")
        'n/a'
        >>> or_default("value", "n/a")
        'value'
    """
    if is_not_empty(text):
        return text
    return fallback


# ============================================================================
# FORMATTING
# ============================================================================


def resolve_locale(culture: LocaleLike) -> Locale:
    """
    Resolve a culture identifier to a babel Locale.

    Accepts both .NET-style ("en-US") and POSIX-style ("en_US") names.

    Args:
        culture: Culture name or an already resolved Locale

    Returns:
        babel Locale

    Raises:
        CultureNotFoundError: If the name is unknown or malformed
    """
    if isinstance(culture, Locale):
        return culture
    if is_empty(culture):
        raise CultureNotFoundError("Culture name cannot be empty", culture_name=culture)

    try:
        return Locale.parse(culture.replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise CultureNotFoundError(f"Unknown culture: {e}", culture_name=culture) from e


def _territory_currency(locale: Locale) -> str:
    """Get the ISO 4217 code in current use for the locale's territory."""
    if not locale.territory:
        raise CultureNotFoundError(
            "Culture is neutral and has no currency", culture_name=str(locale)
        )

    currencies = get_territory_currencies(locale.territory)
    if not currencies:
        raise CultureNotFoundError(
            f"No currency in use for territory {locale.territory}",
            culture_name=str(locale),
        )
    return currencies[0]


class _LocaleFormatter(string.Formatter):
    """
    str.format machinery restricted to positional placeholders, with
    locale-aware rendering of numbers.

    Numeric format codes:
        ""      decimal separator of the locale ("1234,5" in de_DE)
        C       currency of the locale's territory ("$1,234.50")
        N[k]    grouped number with k decimals, default 2 ("1,234.50")
        P[k]    percent with k decimals, default 0 ("26%")
    Anything else is passed to the built-in format().
    """

    def __init__(self, locale: Locale) -> None:
        super().__init__()
        self.locale = locale

    def get_value(self, key: Union[int, str], args: Any, kwargs: Any) -> Any:
        if isinstance(key, str):
            raise KeyError(f"Named placeholder '{{{key}}}' is not supported")
        return args[key]

    def format_field(self, value: Any, format_spec: str) -> str:
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
            return format(value, format_spec)

        if not format_spec:
            if isinstance(value, int):
                return str(value)
            return str(value).replace(".", get_decimal_symbol(self.locale))

        match = _STANDARD_NUMERIC_SPEC.fullmatch(format_spec)
        if match is None:
            return format(value, format_spec)

        code, digits = match.group(1).upper(), match.group(2)
        if code == "C":
            if digits:
                raise ValueError(f"Precision is not supported for currency: {format_spec!r}")
            return format_currency(value, _territory_currency(self.locale), locale=self.locale)

        if code == "N":
            decimals = int(digits) if digits else DEFAULT_NUMBER_DECIMALS
            pattern = "#,##0" + ("." + "0" * decimals if decimals else "")
            return format_decimal(value, format=pattern, locale=self.locale)

        decimals = int(digits) if digits else DEFAULT_PERCENT_DECIMALS
        pattern = "#,##0" + ("." + "0" * decimals if decimals else "") + "%"
        return format_percent(value, format=pattern, locale=self.locale)


def format_with(template: Optional[str], *args: Any, provider: Optional[LocaleLike] = None) -> str:
    """
    Substitute positional placeholders ({0}, {1}, ...) in a template.

    A shortcut for composite formatting with a culture. Doubled braces
    ("{{", "}}") render literal braces; extra arguments are ignored.

    Args:
        template: Template with positional placeholders
        *args: Values for the placeholders
        provider: Culture name or babel Locale (defaults to config default_locale)

    Returns:
        Formatted string

    Raises:
        NullArgumentError: If template is None
        FormatError: If a placeholder has no matching argument, a named
            placeholder is used, or the template/format spec is malformed
        CultureNotFoundError: If provider cannot be resolved

    Examples:
        >>> format_with("{0} of {1}", 3, 10)
        '3 of 10'
        >>> format_with("{0:N2}", 1234.5, provider="de-DE")
        '1.234,50'
        >>> format_with("{0} {1}", "only one")
        Traceback (most recent call last):
        FormatError: ...
    """
    if template is None:
        raise NullArgumentError("template")

    locale = resolve_locale(provider if provider is not None else get_config().default_locale)
    formatter = _LocaleFormatter(locale)

    try:
        return formatter.vformat(template, args, {})
    except IndexError as e:
        raise FormatError(
            "Placeholder index has no matching argument", template=template, original_error=e
        ) from e
    except KeyError as e:
        raise FormatError(
            "Only positional placeholders are supported", template=template, original_error=e
        ) from e
    except (ValueError, AttributeError, TypeError) as e:
        raise FormatError("Invalid format template", template=template, original_error=e) from e


def append_with(text: Optional[str], separator: str, *args: Any) -> str:
    """
    Join args followed by text with a separator.

    None values among args render as "".

    Examples:
        >>> append_with("c", "/", "a", "b")
        'a/b/c'

    Raises:
        NullArgumentError: If text is None
    """
    if text is None:
        raise NullArgumentError("text")

    return separator.join("" if item is None else str(item) for item in (*args, text))


def to_currency(amount: Union[Decimal, int, float], culture_name: LocaleLike) -> str:
    """
    Format an amount as currency of the given culture.

    The currency is the one currently in use in the culture's territory,
    and numerals/symbol placement follow the culture's CLDR conventions.

    Args:
        amount: Amount to format
        culture_name: Specific culture such as "en-US" or "de_DE"

    Returns:
        Formatted currency string

    Raises:
        CultureNotFoundError: If the culture is unknown or neutral ("en")

    Examples:
        >>> to_currency(Decimal("1234.5"), "en-US")
        '$1,234.50'
        >>> to_currency(Decimal("1234.5"), "de-DE")
        '1.234,50\xa0€'
    """
    locale = resolve_locale(culture_name)
    return format_currency(amount, _territory_currency(locale), locale=locale)


# ============================================================================
# MASKING AND CHARACTER FILTERING
# ============================================================================


def mask(
    text: Optional[str],
    unmasked_count: int = DEFAULT_UNMASKED_COUNT,
    mask_char: str = DEFAULT_MASK_CHAR,
) -> str:
    """
    Mask all but the last characters of a string.

    Args:
        text: Text to mask (None is treated as "")
        unmasked_count: Trailing characters left visible (default 4)
        mask_char: Replacement character (default "*")

    Returns:
        Masked string of the same length, or text unchanged if it has
        no more than unmasked_count characters

    Raises:
        pydantic.ValidationError: If unmasked_count < 0 or mask_char is
            not a single character

    Examples:
        >>> mask("1234567890")
        '******7890'
        >>> mask("abc")
        'abc'
    """
    options = MaskOptions(unmasked_count=unmasked_count, mask_char=mask_char)
    text = text or ""

    if len(text) <= options.unmasked_count:
        return text

    visible = text[len(text) - options.unmasked_count:]
    return visible.rjust(len(text), options.mask_char)


def remove_chars(text: Optional[str], chars: Iterable[str]) -> str:
    """Remove every character contained in chars, keeping order."""
    if is_empty(text):
        return ""

    excluded = set(chars)
    return "".join(ch for ch in text if ch not in excluded)


def remove_special_chars(text: Optional[str]) -> str:
    """Remove every character outside [A-Za-z0-9]."""
    if is_empty(text):
        return ""
    return NON_ALPHANUMERIC_PATTERN.sub("", text)


def to_int(text: Optional[str]) -> int:
    """
    Best-effort integer conversion.

    Strips every non-digit character and parses the rest in base 10.
    Returns 0 instead of raising when no digits remain or the value does
    not fit a signed 32-bit integer.

    Examples:
        >>> to_int("abc123def")
        123
        >>> to_int("abc")
        0
        >>> to_int("(555) 010-9999")  # 5550109999 overflows int32
        0
    """
    digits = NON_DIGIT_PATTERN.sub("", text) if is_not_empty(text) else ""

    try:
        value = int(digits)
    except ValueError:
        logger.debug(f"No digits to parse in {text!r}, defaulting to 0")
        return 0

    if value > INT32_MAX:
        logger.debug(f"Value {value} exceeds 32-bit range, defaulting to 0")
        return 0
    return value


def remove_alpha_chars(text: Optional[str]) -> int:
    """Strip non-digits and parse the remainder; same contract as to_int()."""
    return to_int(text)


# ============================================================================
# VALIDATION AND MATCHING
# ============================================================================


def is_web_url(text: Optional[str]) -> bool:
    """
    Check whether text is an absolute http(s) URL.

    Examples:
        >>> is_web_url("https://example.com/path?q=1")
        True
        >>> is_web_url("ftp://example.com")
        False
        >>> is_web_url("example.com")
        False
    """
    if is_empty(text):
        return False

    try:
        parts = urlsplit(text.strip())
        parts.port  # raises ValueError on a malformed port
    except ValueError:
        return False

    host = parts.hostname
    if not host or any(ch.isspace() for ch in host):
        return False
    return parts.scheme in WEB_URL_SCHEMES


def _to_ascii_domain(domain: str) -> Optional[str]:
    """IDNA-encode a domain, or None if it is not a valid IDN."""
    # Bracketed address literals are not host names
    if domain.startswith("[") and domain.endswith("]"):
        return domain

    try:
        return idna.encode(domain, uts46=True).decode("ascii")
    except idna.IDNAError as e:
        logger.debug(f"IDNA normalization failed for domain {domain!r}: {e}")
        return None


def is_email(text: Optional[str]) -> bool:
    """
    Check whether text looks like an email address.

    Validation steps:
    1. Reject None/"".
    2. Reject unless the text contains exactly one "@".
    3. IDNA-encode the domain ("bücher.de" -> "xn--bcher-kva.de");
       reject if the domain is not a valid IDN.
    4. Match local@ascii_domain against EMAIL_PATTERN, bounded by
       config email_match_timeout_ms. A timeout counts as a rejection.

    Never raises.

    Examples:
        >>> is_email("user@example.com")
        True
        >>> is_email("not-an-email")
        False
    """
    if is_empty(text):
        return False

    parts = text.split("@")
    if len(parts) != 2:
        return False

    local_part, domain = parts
    ascii_domain = _to_ascii_domain(domain)
    if ascii_domain is None:
        return False

    timeout_ms = get_config().email_match_timeout_ms
    try:
        return EMAIL_PATTERN.fullmatch(f"{local_part}@{ascii_domain}", timeout=timeout_ms / 1000) is not None
    except TimeoutError:
        logger.warning(f"Email pattern match exceeded {timeout_ms}ms, rejecting input")
        return False


def regex_match(text: Optional[str], pattern: str, timeout_ms: Optional[int] = None) -> bool:
    """
    Check whether pattern matches anywhere in text.

    Args:
        text: Text to search (None never matches)
        pattern: Regular expression
        timeout_ms: Optional deadline; exceeding it returns False

    Returns:
        True if the pattern was found

    Raises:
        regex.error: If pattern is not a valid regular expression
    """
    if text is None:
        return False

    timeout = timeout_ms / 1000 if timeout_ms is not None else None
    try:
        return regex.search(pattern, text, timeout=timeout) is not None
    except TimeoutError:
        logger.warning(f"Pattern {pattern!r} exceeded {timeout_ms}ms, treating as no match")
        return False


# ============================================================================
# HASHING AND RANDOM STRINGS
# ============================================================================


def hash_text(text: Optional[str]) -> str:
    """
    Legacy SHA-1 digest of the UTF-8 text, as uppercase hex without separators.

    Not a security primitive; kept bit-exact for compatibility with stored hashes.

    Raises:
        NullArgumentError: If text is None
    """
    if text is None:
        raise NullArgumentError("text")
    return hashlib.sha1(text.encode("utf-8")).hexdigest().upper()


def random_string(length: int, template: Optional[str] = None) -> str:
    """
    Generate a random string of A-Z0-9 characters.

    Characters are drawn uniformly with replacement from a per-call,
    non-cryptographic generator, so concurrent callers never share state.

    Args:
        length: Number of random characters
        template: Optional template; the random part is substituted for {0}

    Returns:
        Random string, or the formatted template

    Raises:
        ValueError: If length is negative

    Examples:
        >>> len(random_string(10))
        10
        >>> random_string(4, "ORD-{0}")  # e.g. 'ORD-7QX2'
    """
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")

    rng = random.Random()
    value = "".join(rng.choices(RANDOM_ALPHABET, k=length))

    if is_empty(template):
        return value
    return format_with(template, value)
