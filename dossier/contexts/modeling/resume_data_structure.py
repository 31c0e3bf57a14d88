"""
Resume Document Structure

Defines the Resume aggregate: identity, full name, location, contacts and sections.
This structure is the unit of storage for every backend in the storage context.

Modeling owns:
- Validating the full name on construction and on every rename
- Masking the location
- Keeping contacts and sections free of empty entries

Storage treats Resume instances as opaque values keyed by uuid.
"""

import uuid as uuid_lib
from functools import total_ordering
from typing import Dict, Optional

from dossier.contexts.modeling.defaults import (
    EMPTY_SECTIONS,
    MAX_SECTION_ITEMS,
    SECTION_VARIANTS,
)
from dossier.contexts.modeling.exceptions import SectionTypeMismatchError
from dossier.contexts.modeling.logger import log_contact_ignored, log_section_replaced
from dossier.contexts.modeling.nomenclature import ContactType, SectionType
from dossier.contexts.modeling.resume_components_data_structures import (
    Organization,
    OrganizationSection,
    Section,
    TextSection,
)
from dossier.contexts.modeling.validation import is_blank, mask_location, validate_full_name


def new_uuid() -> str:
    """Generate a fresh resume identifier."""
    return str(uuid_lib.uuid4())


@total_ordering
class Resume:
    """
    A person's profile: the aggregate root stored by every backend.

    Natural ordering is by full name, then by uuid. Two resumes are equal only
    when uuid, full name, location, contacts and sections all match.

    Contacts and sections are only changed through add_contact() and
    add_section(); the matching properties return copies.
    """

    def __init__(self, full_name: Optional[str], location: Optional[str] = None, uuid: str = None):
        """
        Create a resume.

        Args:
            full_name: Person's name (validated, see validation.validate_full_name)
            location: Free-text location (masked, see validation.mask_location)
            uuid: Explicit identifier when rehydrating or replacing; generated if omitted

        Raises:
            NameValidationError: If full_name breaks a naming rule
        """
        self._uuid = uuid if uuid is not None else new_uuid()
        self._full_name = validate_full_name(full_name)
        self._location = mask_location(location)
        self._contacts: Dict[ContactType, str] = {}
        self._sections: Dict[SectionType, Section] = {}

    @classmethod
    def empty(cls, full_name: str = "New resume", location: Optional[str] = None) -> "Resume":
        """
        Build a template resume with every section type pre-populated by its empty default.
        """
        resume = cls(full_name, location)
        for section_type, section in EMPTY_SECTIONS.items():
            resume.add_section(section_type, section)
        return resume

    # =========================================================================
    # IDENTITY AND SCALAR FIELDS
    # =========================================================================

    @property
    def uuid(self) -> str:
        return self._uuid

    @property
    def full_name(self) -> str:
        return self._full_name

    @full_name.setter
    def full_name(self, value: Optional[str]) -> None:
        self._full_name = validate_full_name(value)

    @property
    def location(self) -> str:
        return self._location

    @location.setter
    def location(self, value: Optional[str]) -> None:
        self._location = mask_location(value)

    # =========================================================================
    # CONTACTS
    # =========================================================================

    @property
    def contacts(self) -> Dict[ContactType, str]:
        return dict(self._contacts)

    def add_contact(self, contact_type: ContactType, value: Optional[str]) -> None:
        """
        Set the value for a contact type, replacing any previous value.

        None, empty and whitespace-only values are ignored: no entry is written
        and an existing value is left as it was.
        """
        if is_blank(value):
            log_contact_ignored(contact_type.name)
            return
        self._contacts[contact_type] = value

    def get_contact(self, contact_type: ContactType) -> Optional[str]:
        return self._contacts.get(contact_type)

    def remove_contact(self, contact_type: ContactType) -> bool:
        """Remove a contact. Returns False if it was not set."""
        return self._contacts.pop(contact_type, None) is not None

    # =========================================================================
    # SECTIONS
    # =========================================================================

    @property
    def sections(self) -> Dict[SectionType, Section]:
        return dict(self._sections)

    def add_section(self, section_type: SectionType, section: Section) -> None:
        """
        Attach a section, replacing any existing section of the same type wholesale.

        Raises:
            SectionTypeMismatchError: If the section variant does not match the type
        """
        expected = SECTION_VARIANTS[section_type]
        if not isinstance(section, expected):
            raise SectionTypeMismatchError(
                section_type.name, expected.__name__, type(section).__name__
            )
        if section_type in self._sections:
            log_section_replaced(self._uuid, section_type.name)
        self._sections[section_type] = section

    def add_text_section(self, section_type: SectionType, *items: str) -> None:
        """Attach a TextSection built from the given statements."""
        self.add_section(section_type, TextSection(items=items))

    def add_organization_section(self, section_type: SectionType, *items: Organization) -> None:
        """Attach an OrganizationSection built from the given organizations."""
        self.add_section(section_type, OrganizationSection(items=items))

    def get_section(self, section_type: SectionType) -> Optional[Section]:
        return self._sections.get(section_type)

    def section_is_full(self, section_type: SectionType) -> bool:
        """True when a section already holds MAX_SECTION_ITEMS items or more."""
        section = self._sections.get(section_type)
        return section is not None and len(section.items) >= MAX_SECTION_ITEMS

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def _sort_key(self):
        return (self._full_name, self._uuid)

    def __eq__(self, other):
        if not isinstance(other, Resume):
            return NotImplemented
        return (
            self._uuid == other._uuid
            and self._full_name == other._full_name
            and self._location == other._location
            and self._contacts == other._contacts
            and self._sections == other._sections
        )

    def __lt__(self, other):
        if not isinstance(other, Resume):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    # Mutable aggregate: equality is structural, so instances are not hashable
    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"Resume(uuid={self._uuid!r}, full_name={self._full_name!r}, "
            f"location={self._location!r}, contacts={len(self._contacts)}, "
            f"sections={[t.name for t in self._sections]})"
        )
