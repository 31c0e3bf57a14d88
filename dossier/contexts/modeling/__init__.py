"""
Modeling Context

Responsibilities:
- Defines the Resume aggregate and its value objects (Link, Period, Organization)
- Defines the section tagged union (TextSection | OrganizationSection)
- Validates full names and sanitizes locations and contacts

Owns: Resume structure, field rules, dict (de)serialization
Never: Stores resumes or decides uniqueness of ids
"""

from dossier.contexts.modeling.defaults import (
    EMPTY_SECTIONS,
    MAX_NAME_LENGTH,
    MAX_SECTION_ITEMS,
    SECTION_VARIANTS,
)
from dossier.contexts.modeling.exceptions import (
    InvalidResumeDataError,
    NameBlankError,
    NameEmptyError,
    NameErrorKind,
    NameRequiredError,
    NameTooLongError,
    NameValidationError,
    PeriodError,
    SectionTypeMismatchError,
)
from dossier.contexts.modeling.nomenclature import ContactType, SectionType
from dossier.contexts.modeling.resume_components_data_structures import (
    Link,
    Organization,
    OrganizationSection,
    Period,
    Section,
    TextSection,
)
from dossier.contexts.modeling.resume_data_structure import Resume
from dossier.contexts.modeling.serialization import resume_from_dict, resume_to_dict

__all__ = [
    # Aggregate and value objects
    "Resume",
    "Link",
    "Period",
    "Organization",
    "Section",
    "TextSection",
    "OrganizationSection",
    # Enumerations and defaults
    "ContactType",
    "SectionType",
    "EMPTY_SECTIONS",
    "SECTION_VARIANTS",
    "MAX_NAME_LENGTH",
    "MAX_SECTION_ITEMS",
    # Errors
    "NameValidationError",
    "NameErrorKind",
    "NameRequiredError",
    "NameEmptyError",
    "NameBlankError",
    "NameTooLongError",
    "SectionTypeMismatchError",
    "PeriodError",
    "InvalidResumeDataError",
    # Serialization
    "resume_to_dict",
    "resume_from_dict",
]
