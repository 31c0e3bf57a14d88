"""
Plain-dict conversion for Resume instances.

Used to rehydrate resumes from YAML/JSON files (with their original uuid) and to
dump them back out. The dict layout is:

    uuid: "..."                  # optional on input, generated when missing
    full_name: "..."
    location: "..."
    contacts: {mail: "...", phone: "..."}
    sections:
      objective: ["..."]                         # text variant
      experience:                                # organization variant
        - name: "..."
          url: "..."
          periods:
            - {start: "2020-01", end: "2023-12", title: "...", description: "..."}
"""

from typing import Any, Dict, List, Optional, Tuple

from dossier.contexts.modeling.defaults import SECTION_VARIANTS
from dossier.contexts.modeling.exceptions import InvalidResumeDataError, PeriodError
from dossier.contexts.modeling.nomenclature import contact_type_from_name, section_type_from_name
from dossier.contexts.modeling.resume_components_data_structures import (
    Link,
    Organization,
    OrganizationSection,
    Period,
    TextSection,
)
from dossier.contexts.modeling.resume_data_structure import Resume


def _format_year_month(year: Optional[int], month: Optional[int]) -> Optional[str]:
    if year is None:
        return None
    return f"{year:04d}-{month:02d}"


def _mapping(value: Any, field_name: str) -> Dict[Any, Any]:
    """Return value as a dict ({} for None), rejecting any other type."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidResumeDataError(f"'{field_name}' must be a mapping, got {type(value).__name__}")
    return value


def _parse_year_month(value: Any) -> Tuple[Optional[int], Optional[int]]:
    """Parse "YYYY-MM" (or None / "now" for ongoing) into (year, month)."""
    if value is None or str(value).strip().lower() in ("", "now", "present"):
        return None, None
    parts = str(value).strip().split("-")
    if len(parts) < 2:
        raise InvalidResumeDataError(f"Expected YYYY-MM, got {value!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise InvalidResumeDataError(f"Expected YYYY-MM, got {value!r}") from None


def period_to_dict(period: Period) -> Dict[str, Any]:
    return {
        "start": _format_year_month(period.start_year, period.start_month),
        "end": _format_year_month(period.end_year, period.end_month),
        "title": period.title,
        "description": period.description,
    }


def period_from_dict(data: Dict[str, Any]) -> Period:
    data = _mapping(data, "period")
    start_year, start_month = _parse_year_month(data.get("start"))
    if start_year is None:
        raise InvalidResumeDataError("Period is missing 'start'")
    end_year, end_month = _parse_year_month(data.get("end"))
    try:
        return Period(
            start_year=start_year,
            start_month=start_month,
            end_year=end_year,
            end_month=end_month,
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
        )
    except PeriodError as e:
        raise InvalidResumeDataError(str(e)) from e


def organization_to_dict(organization: Organization) -> Dict[str, Any]:
    return {
        "name": organization.link.name,
        "url": organization.link.url,
        "periods": [period_to_dict(p) for p in organization.periods],
    }


def organization_from_dict(data: Dict[str, Any]) -> Organization:
    data = _mapping(data, "organization")
    if "name" not in data:
        raise InvalidResumeDataError("Organization is missing 'name'")
    periods = [period_from_dict(p) for p in data.get("periods") or []]
    return Organization(link=Link(str(data["name"]), data.get("url")), periods=periods)


def resume_to_dict(resume: Resume) -> Dict[str, Any]:
    """
    Convert a Resume to a plain dict (see module docstring for layout).
    """
    sections: Dict[str, List[Any]] = {}
    for section_type, section in resume.sections.items():
        if isinstance(section, TextSection):
            sections[section_type.value] = list(section.items)
        else:
            sections[section_type.value] = [organization_to_dict(o) for o in section.items]

    return {
        "uuid": resume.uuid,
        "full_name": resume.full_name,
        "location": resume.location,
        "contacts": {
            contact_type.value: value for contact_type, value in resume.contacts.items()
        },
        "sections": sections,
    }


def resume_from_dict(data: Dict[str, Any]) -> Resume:
    """
    Rebuild a Resume from a plain dict, keeping its uuid when present.

    Args:
        data: Dict in the layout produced by resume_to_dict()

    Returns:
        Resume instance (name validated, location masked, blank contacts skipped)

    Raises:
        InvalidResumeDataError: If the dict is not a mapping or names unknown types
        NameValidationError: If full_name breaks a naming rule
    """
    if not isinstance(data, dict):
        raise InvalidResumeDataError(f"Expected a mapping, got {type(data).__name__}")

    # YAML may yield numbers for bare scalars
    full_name, location, uuid = (
        None if data.get(key) is None else str(data[key])
        for key in ("full_name", "location", "uuid")
    )
    resume = Resume(full_name, location, uuid=uuid)

    for name, value in _mapping(data.get("contacts"), "contacts").items():
        try:
            contact_type = contact_type_from_name(name)
        except KeyError as e:
            raise InvalidResumeDataError(str(e)) from e
        resume.add_contact(contact_type, None if value is None else str(value))

    for name, items in _mapping(data.get("sections"), "sections").items():
        try:
            section_type = section_type_from_name(name)
        except KeyError as e:
            raise InvalidResumeDataError(str(e)) from e
        items = items or []
        if not isinstance(items, list):
            raise InvalidResumeDataError(f"Section '{name}' must be a list")
        if SECTION_VARIANTS[section_type] is TextSection:
            resume.add_section(section_type, TextSection(items=[str(i) for i in items]))
        else:
            resume.add_section(
                section_type, OrganizationSection(items=[organization_from_dict(o) for o in items])
            )

    return resume
