"""Unit tests for the Resume aggregate: contacts, sections, equality and ordering."""

import pytest

from dossier.contexts.modeling import (
    EMPTY_SECTIONS,
    MAX_SECTION_ITEMS,
    ContactType,
    Organization,
    OrganizationSection,
    Period,
    Resume,
    SectionType,
    SectionTypeMismatchError,
    TextSection,
)


@pytest.mark.unit
def test_new_resumes_get_distinct_uuids():
    first = Resume("Bob Smith", "NYC")
    second = Resume("Bob Smith", "NYC")

    assert first.uuid
    assert first.uuid != second.uuid


@pytest.mark.unit
def test_explicit_uuid_is_kept():
    assert Resume("Bob", "NYC", uuid="uuid-1").uuid == "uuid-1"


@pytest.mark.unit
def test_uuid_is_read_only():
    resume = Resume("Bob", "NYC")
    with pytest.raises(AttributeError):
        resume.uuid = "other"


# Contacts


@pytest.mark.unit
@pytest.mark.parametrize("blank", [None, "", "   ", "\t"])
def test_blank_contact_is_ignored(blank):
    resume = Resume("Bob", "NYC")
    resume.add_contact(ContactType.EMAIL, blank)

    assert resume.contacts == {}
    assert resume.get_contact(ContactType.EMAIL) is None


@pytest.mark.unit
def test_contact_value_is_stored_unchanged():
    resume = Resume("Bob", "NYC")
    resume.add_contact(ContactType.EMAIL, "a@b.com")

    assert resume.get_contact(ContactType.EMAIL) == "a@b.com"
    assert resume.get_contact(ContactType.MAIL) == "a@b.com"


@pytest.mark.unit
def test_blank_contact_does_not_clear_existing_value():
    resume = Resume("Bob", "NYC")
    resume.add_contact(ContactType.PHONE, "+1-555-0100")
    resume.add_contact(ContactType.PHONE, "  ")

    assert resume.get_contact(ContactType.PHONE) == "+1-555-0100"


@pytest.mark.unit
def test_contact_type_holds_one_value():
    resume = Resume("Bob", "NYC")
    resume.add_contact(ContactType.SKYPE, "bob.old")
    resume.add_contact(ContactType.SKYPE, "bob.new")

    assert resume.contacts == {ContactType.SKYPE: "bob.new"}


@pytest.mark.unit
def test_contacts_property_is_a_copy():
    resume = Resume("Bob", "NYC")
    resume.contacts[ContactType.ICQ] = "12345"

    assert resume.get_contact(ContactType.ICQ) is None


@pytest.mark.unit
def test_remove_contact():
    resume = Resume("Bob", "NYC")
    resume.add_contact(ContactType.MOBILE, "+1-555-0199")

    assert resume.remove_contact(ContactType.MOBILE) is True
    assert resume.remove_contact(ContactType.MOBILE) is False


# Sections


@pytest.mark.unit
def test_add_text_section():
    resume = Resume("Bob", "NYC")
    resume.add_text_section(SectionType.ACHIEVEMENT, "First", "Second")

    assert resume.get_section(SectionType.ACHIEVEMENT) == TextSection(items=("First", "Second"))


@pytest.mark.unit
def test_readding_section_replaces_it():
    resume = Resume("Bob", "NYC")
    resume.add_text_section(SectionType.ACHIEVEMENT, "First", "Second")
    resume.add_text_section(SectionType.ACHIEVEMENT, "Third")

    assert resume.get_section(SectionType.ACHIEVEMENT).items == ("Third",)


@pytest.mark.unit
def test_add_organization_section():
    org = Organization.create("Acme", "https://acme.example", Period(2020, 1, 2023, 12, "Dev", "Work"))
    resume = Resume("Bob", "NYC")
    resume.add_organization_section(SectionType.EXPERIENCE, org)

    section = resume.get_section(SectionType.EXPERIENCE)
    assert isinstance(section, OrganizationSection)
    assert section.items[0].link.name == "Acme"


@pytest.mark.unit
def test_section_variant_must_match_type():
    resume = Resume("Bob", "NYC")

    with pytest.raises(SectionTypeMismatchError):
        resume.add_section(SectionType.EXPERIENCE, TextSection.of("not an organization"))

    with pytest.raises(SectionTypeMismatchError):
        resume.add_section(SectionType.OBJECTIVE, OrganizationSection())

    assert resume.sections == {}


@pytest.mark.unit
def test_empty_template_has_every_section():
    template = Resume.empty()

    assert set(template.sections) == set(SectionType)
    for section_type, section in template.sections.items():
        assert section == EMPTY_SECTIONS[section_type]


@pytest.mark.unit
def test_section_is_full():
    resume = Resume("Bob", "NYC")
    assert resume.section_is_full(SectionType.ACHIEVEMENT) is False

    resume.add_text_section(SectionType.ACHIEVEMENT, *[f"a{i}" for i in range(MAX_SECTION_ITEMS)])
    assert resume.section_is_full(SectionType.ACHIEVEMENT) is True


# Equality and ordering


@pytest.mark.unit
def test_equality_covers_every_field(make_resume):
    first = make_resume("Bob Smith", "NYC", uuid="u1")
    second = make_resume("Bob Smith", "NYC", uuid="u1")
    assert first == second

    second.add_contact(ContactType.PHONE, "+1")
    assert first != second

    third = make_resume("Bob Smith", "NYC", uuid="u2")
    assert first != third

    fourth = make_resume("Bob Smith", "LA", uuid="u1")
    assert first != fourth

    fifth = make_resume("Bob Smith", "NYC", uuid="u1")
    fifth.add_text_section(SectionType.OBJECTIVE, "Lead")
    assert first != fifth


@pytest.mark.unit
def test_resumes_are_unhashable():
    with pytest.raises(TypeError):
        hash(Resume("Bob", "NYC"))


@pytest.mark.unit
def test_ordering_by_name_then_uuid():
    boris = Resume("Boris", "X", uuid="a")
    alice_b = Resume("Alice", "X", uuid="b")
    alice_a = Resume("Alice", "X", uuid="a")

    assert sorted([boris, alice_b, alice_a]) == [alice_a, alice_b, boris]
    assert alice_a < alice_b < boris
