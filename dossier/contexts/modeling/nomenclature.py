"""
Fixed enumerations identifying contact kinds and section kinds on a resume.
"""

from enum import Enum


class ContactType(Enum):
    """Kind of contact value a resume can hold (at most one value per kind)."""

    PHONE = "phone"
    MOBILE = "mobile"
    HOME_PHONE = "home_phone"
    SKYPE = "skype"
    MAIL = "mail"
    ICQ = "icq"
    EMAIL = "mail"  # alias of MAIL

    @property
    def title(self) -> str:
        return CONTACT_TITLES[self]


class SectionType(Enum):
    """Kind of section a resume can hold (at most one section per kind)."""

    OBJECTIVE = "objective"
    ACHIEVEMENT = "achievement"
    QUALIFICATIONS = "qualifications"
    EXPERIENCE = "experience"
    EDUCATION = "education"

    @property
    def title(self) -> str:
        return SECTION_TITLES[self]


CONTACT_TITLES = {
    ContactType.PHONE: "Phone",
    ContactType.MOBILE: "Mobile",
    ContactType.HOME_PHONE: "Home phone",
    ContactType.SKYPE: "Skype",
    ContactType.MAIL: "Email",
    ContactType.ICQ: "ICQ",
}

SECTION_TITLES = {
    SectionType.OBJECTIVE: "Objective",
    SectionType.ACHIEVEMENT: "Achievements",
    SectionType.QUALIFICATIONS: "Qualifications",
    SectionType.EXPERIENCE: "Experience",
    SectionType.EDUCATION: "Education",
}


def contact_type_from_name(name: str) -> ContactType:
    """
    Resolve a ContactType from its member name or value, case-insensitively.

    Args:
        name: Member name ("MAIL", "email") or value ("home_phone")

    Raises:
        KeyError: If no contact type matches
    """
    key = str(name).strip()
    if key.upper() in ContactType.__members__:
        return ContactType[key.upper()]
    try:
        return ContactType(key.lower())
    except ValueError:
        raise KeyError(f"Unknown contact type: {name}") from None


def section_type_from_name(name: str) -> SectionType:
    """
    Resolve a SectionType from its member name or value, case-insensitively.

    Raises:
        KeyError: If no section type matches
    """
    key = str(name).strip()
    if key.upper() in SectionType.__members__:
        return SectionType[key.upper()]
    try:
        return SectionType(key.lower())
    except ValueError:
        raise KeyError(f"Unknown section type: {name}") from None
