"""
Validation and sanitization rules for resume fields.

Two different policies live here:
- Full names are rejected outright when they break a rule (raises NameValidationError).
- Locations and contact values are sanitized or silently skipped, never rejected.
"""

import re
from typing import Optional

from dossier.contexts.modeling.defaults import MAX_NAME_LENGTH
from dossier.contexts.modeling.exceptions import (
    NameBlankError,
    NameEmptyError,
    NameRequiredError,
    NameTooLongError,
    NameValidationError,
)
from dossier.contexts.modeling.logger import log_name_rejected

EMOJI_PATTERN = re.compile(
    "["
    "\U0001F600-\U0001F64F"  # emoticons
    "\U0001F300-\U0001F5FF"  # symbols & pictographs
    "\U0001F680-\U0001F6FF"  # transport & map
    "\U0001F700-\U0001F77F"  # alchemical
    "\U0001F780-\U0001F7FF"  # geometric shapes extended
    "\U0001F800-\U0001F8FF"  # supplemental arrows-C
    "\U0001F900-\U0001F9FF"  # supplemental symbols & pictographs
    "\U0001FA00-\U0001FA6F"  # chess symbols
    "\U0001FA70-\U0001FAFF"  # symbols & pictographs extended-A
    "\u2600-\u26FF"  # misc symbols
    "\u2700-\u27BF"  # dingbats
    "]"
)

MARKUP_TAG_PATTERN = re.compile(r"<[^<>]*>")
CONTROL_CHAR_PATTERN = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")


def strip_emoji(text: str) -> str:
    """Remove emoji code points from text."""
    return EMOJI_PATTERN.sub("", text)


def validate_full_name(full_name: Optional[str], max_length: int = MAX_NAME_LENGTH) -> str:
    """
    Check a candidate full name and return the cleaned value to store.

    Rules are checked in order, on the raw input:
    None, empty string, whitespace only, longer than max_length.
    A name that passes has its emoji removed and is trimmed.

    Args:
        full_name: Raw name as supplied by the caller
        max_length: Maximum allowed length of the raw input

    Returns:
        Cleaned full name

    Raises:
        NameRequiredError: If full_name is None
        NameEmptyError: If full_name is ""
        NameBlankError: If full_name is whitespace only
        NameTooLongError: If full_name exceeds max_length characters
    """
    try:
        if full_name is None:
            raise NameRequiredError()
        if full_name == "":
            raise NameEmptyError()
        if full_name.strip() == "":
            raise NameBlankError(full_name)
        # Length counts code points, so an astral character counts once
        if len(full_name) > max_length:
            raise NameTooLongError(full_name, max_length)
        cleaned = strip_emoji(full_name).strip()
        # Nothing left once emoji are gone
        if cleaned == "":
            raise NameBlankError(full_name)
    except NameValidationError as e:
        log_name_rejected(e.kind.value, e.message)
        raise

    return cleaned


def mask_location(location: Optional[str]) -> str:
    """
    Sanitize a free-text location before it is stored.

    Deterministic and total: never raises. None becomes "", markup tags and
    control characters are removed, surrounding whitespace is trimmed.
    Plain text such as "NYC" passes through unchanged.
    """
    if location is None:
        return ""
    text = MARKUP_TAG_PATTERN.sub("", str(location))
    text = CONTROL_CHAR_PATTERN.sub("", text)
    return text.strip()


def is_blank(value: Optional[str]) -> bool:
    """True for None, "" and whitespace-only strings."""
    return value is None or value.strip() == ""
