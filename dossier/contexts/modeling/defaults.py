"""
Default values and limits for the resume document model.

Provides shared constants used by:
- validation.py (name length limit)
- resume_data_structure.py (section variant checks, empty template)
"""

from typing import Dict, Type

from dossier.contexts.modeling.nomenclature import SectionType
from dossier.contexts.modeling.resume_components_data_structures import (
    Link,
    Organization,
    OrganizationSection,
    Section,
    TextSection,
)

MAX_NAME_LENGTH = 255

# Advisory limit on items per section (not enforced on add)
MAX_SECTION_ITEMS = 100

EMPTY_LINK = Link(name="", url=None)
EMPTY_ORGANIZATION = Organization(link=EMPTY_LINK)

EMPTY_TEXT_SECTION = TextSection(items=("",))
EMPTY_ORGANIZATION_SECTION = OrganizationSection(items=(EMPTY_ORGANIZATION,))

# Which section variant each section type accepts
SECTION_VARIANTS: Dict[SectionType, Type[Section]] = {
    SectionType.OBJECTIVE: TextSection,
    SectionType.ACHIEVEMENT: TextSection,
    SectionType.QUALIFICATIONS: TextSection,
    SectionType.EXPERIENCE: OrganizationSection,
    SectionType.EDUCATION: OrganizationSection,
}

# Empty default instance per section type, used to pre-populate templates
EMPTY_SECTIONS: Dict[SectionType, Section] = {
    section_type: EMPTY_TEXT_SECTION if variant is TextSection else EMPTY_ORGANIZATION_SECTION
    for section_type, variant in SECTION_VARIANTS.items()
}
