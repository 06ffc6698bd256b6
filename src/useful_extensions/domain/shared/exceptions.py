"""
Extension Library Exceptions

This module defines the exception hierarchy raised by the strict helpers.
All library-specific exceptions inherit from ExtensionsException.

Responsibility:
    - Base exception class for library errors
    - Descriptive errors for strict-fail helpers (is_in, format_with, hash_text)
    - Clear separation from Python built-in exceptions

Architecture Notes:
    - Part of Shared Domain (used by every utility group)
    - Best-effort helpers (to_int, is_email, ...) never raise these;
      they return a safe default instead
"""


class ExtensionsException(Exception):
    """
    Base exception for all library errors.

    Catch this to handle every error raised by a strict helper without
    listing the concrete subclasses.

    Examples:
        >>> raise ExtensionsException("Something went wrong")

        >>> try:
        ...     is_in(None, 1, 2)
        ... except ExtensionsException as e:
        ...     logger.error(f"Extension error: {e}")
    """

    def __init__(self, message: str) -> None:
        """
        Initialize exception with error message.

        Args:
            message: Human-readable error description
        """
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.__class__.__name__}: {self.message}"

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"{self.__class__.__name__}(message={self.message!r})"


class NullArgumentError(ExtensionsException):
    """
    Raised when a required argument is None.

    Used by the strict helpers where an absent value is a caller bug:
    - is_in() when the probed value is None
    - format_with() when the template is None
    - hash_text() / append_with() when the text is None

    Attributes:
        argument_name: Name of the offending parameter

    Examples:
        >>> raise NullArgumentError("value")
        >>> str(NullArgumentError("template"))
        "NullArgumentError: Argument 'template' cannot be None"
    """

    def __init__(self, argument_name: str, message: str | None = None) -> None:
        """
        Initialize null argument error.

        Args:
            argument_name: Name of the parameter that was None
            message: Optional custom description (generated when omitted)
        """
        self.argument_name = argument_name
        super().__init__(message or f"Argument '{argument_name}' cannot be None")


class FormatError(ExtensionsException):
    """
    Raised when a composite format template cannot be rendered.

    This exception is raised when:
    - A placeholder index has no matching positional argument ("{2}" with 2 args)
    - A named placeholder is used ("{name}" - only positional indexes are supported)
    - Braces are unbalanced ("{0")
    - A format spec is rejected by the value's __format__

    Attributes:
        template: Template that failed to render (optional)
        original_error: Underlying Python exception (optional)

    Examples:
        >>> raise FormatError(
        ...     "Index 1 has no matching argument",
        ...     template="{0} {1}",
        ...     original_error=IndexError("Replacement index 1 out of range"),
        ... )
    """

    def __init__(
        self,
        message: str,
        template: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """
        Initialize format error.

        Args:
            message: Error description
            template: Template that failed (optional)
            original_error: Original exception from str.format machinery (optional)
        """
        self.template = template
        self.original_error = original_error

        detailed_parts = [message]
        if template is not None:
            detailed_parts.append(f"Template: {template!r}")
        if original_error:
            detailed_parts.append(
                f"Original error: {type(original_error).__name__}: {original_error}"
            )

        super().__init__(" | ".join(detailed_parts))


class CultureNotFoundError(ExtensionsException):
    """
    Raised when a culture name cannot be resolved to formatting conventions.

    This exception is raised when:
    - The culture name is unknown to the CLDR data shipped with babel
    - The culture name is malformed ("xx-YY-ZZ-??")
    - The culture is neutral (no territory), so no currency can be derived

    Attributes:
        culture_name: The culture name as supplied by the caller

    Examples:
        >>> raise CultureNotFoundError("Unknown culture", culture_name="xx-XX")
    """

    def __init__(self, message: str, culture_name: str | None = None) -> None:
        """
        Initialize culture resolution error.

        Args:
            message: Error description
            culture_name: Culture name that failed to resolve (optional)
        """
        self.culture_name = culture_name
        if culture_name is not None:
            super().__init__(f"{message} | Culture: {culture_name!r}")
        else:
            super().__init__(message)
