"""Custom exceptions for the modeling context."""

from enum import Enum
from typing import Optional


class NameErrorKind(Enum):
    """Which full-name rule a candidate value broke."""

    REQUIRED = "required"
    EMPTY = "empty"
    BLANK = "blank"
    TOO_LONG = "too_long"


class NameValidationError(ValueError):
    """
    Exception raised when a resume full name is rejected.

    Attributes:
        kind: The rule that was violated
        value: The rejected input (None for NameRequiredError)
    """

    kind: NameErrorKind

    def __init__(self, message: str, value: Optional[str] = None):
        self.message = message
        self.value = value
        super().__init__(message)


class NameRequiredError(NameValidationError):
    kind = NameErrorKind.REQUIRED

    def __init__(self):
        super().__init__("Full name is required")


class NameEmptyError(NameValidationError):
    kind = NameErrorKind.EMPTY

    def __init__(self):
        super().__init__("Full name must not be empty", value="")


class NameBlankError(NameValidationError):
    kind = NameErrorKind.BLANK

    def __init__(self, value: str):
        super().__init__("Full name must not consist only of whitespace", value=value)


class NameTooLongError(NameValidationError):
    kind = NameErrorKind.TOO_LONG

    def __init__(self, value: str, max_length: int):
        self.max_length = max_length
        super().__init__(
            f"Full name is too long ({len(value)} characters, maximum {max_length})",
            value=value,
        )


class SectionTypeMismatchError(TypeError):
    """
    Exception raised when a section variant is attached to a section type that
    expects the other variant (e.g. a TextSection under EXPERIENCE).

    Attributes:
        section_type_name: Name of the section type being populated
        expected: Name of the variant class the section type accepts
        actual: Name of the variant class that was supplied
    """

    def __init__(self, section_type_name: str, expected: str, actual: str):
        self.section_type_name = section_type_name
        self.expected = expected
        self.actual = actual
        super().__init__(f"Section {section_type_name} expects {expected}, got {actual}")


class PeriodError(ValueError):
    """Exception raised when a Period has an impossible start/end combination."""

    pass


class InvalidResumeDataError(ValueError):
    """
    Exception raised when serialized resume data is missing required fields
    or references unknown contact/section types.
    """

    pass
