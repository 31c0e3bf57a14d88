"""
Integration tests: end-to-end usage of a configured store.

Each test builds its backend through get_storage() the way an application would,
then drives the model and storage together.
"""

import pytest

from dossier.contexts.modeling import (
    ContactType,
    NameBlankError,
    NameEmptyError,
    NameRequiredError,
    Organization,
    Period,
    Resume,
    SectionType,
)
from dossier.contexts.storage import (
    NotFoundError,
    StorageErrorKind,
    StoreConfig,
    get_storage,
    populate_storage,
)

BACKENDS = [StoreConfig(backend="array"), StoreConfig(backend="map")]


@pytest.mark.integration
@pytest.mark.parametrize("config", BACKENDS, ids=["array", "map"])
def test_save_and_load_round_trip(config):
    storage = get_storage(config)
    resume = Resume("Bob Smith", "NYC")

    storage.save(resume).unwrap()
    loaded = storage.load(resume.uuid).unwrap()

    assert loaded.full_name == "Bob Smith"
    assert loaded.location == "NYC"


@pytest.mark.integration
@pytest.mark.parametrize("config", BACKENDS, ids=["array", "map"])
def test_sorted_listing(config):
    storage = get_storage(config)
    storage.save(Resume("Boris", "Berlin"))
    storage.save(Resume("Alice", "Paris"))

    assert [r.full_name for r in storage.get_all_sorted()] == ["Alice", "Boris"]


@pytest.mark.integration
def test_bounded_backend_capacity_scenario():
    storage = get_storage(StoreConfig(backend="array", capacity=2))
    a, b, c = Resume("A", "X"), Resume("B", "X"), Resume("C", "X")

    assert storage.save(a).success
    assert storage.save(b).success
    assert storage.save(c).error is StorageErrorKind.CAPACITY_EXCEEDED

    assert storage.delete(a.uuid).success
    assert storage.save(c).success
    assert [r.full_name for r in storage.get_all_sorted()] == ["B", "C"]


@pytest.mark.integration
def test_unbounded_backend_has_no_ceiling():
    storage = get_storage(StoreConfig(backend="map", capacity=2))
    for i in range(250):
        assert storage.save(Resume(f"Person {i:03d}", "X")).success

    assert storage.size() == 250


@pytest.mark.integration
@pytest.mark.parametrize("config", BACKENDS, ids=["array", "map"])
def test_update_of_unknown_resume_is_not_found(config):
    storage = get_storage(config)

    result = storage.update(Resume("Never Saved", "X"))

    assert result.error is StorageErrorKind.NOT_FOUND
    with pytest.raises(NotFoundError):
        result.unwrap()


@pytest.mark.integration
@pytest.mark.parametrize(
    "full_name,error_class",
    [(None, NameRequiredError), ("   ", NameBlankError), ("", NameEmptyError)],
)
def test_invalid_names_never_reach_storage(full_name, error_class):
    storage = get_storage(StoreConfig(backend="map"))

    with pytest.raises(error_class):
        storage.save(Resume(full_name, "X"))

    assert storage.size() == 0


@pytest.mark.integration
def test_email_contact_scenario():
    storage = get_storage(StoreConfig(backend="array"))
    resume = Resume("Bob Smith", "NYC")

    resume.add_contact(ContactType.EMAIL, "")
    assert resume.contacts == {}

    resume.add_contact(ContactType.EMAIL, "a@b.com")
    storage.save(resume)

    loaded = storage.load(resume.uuid).value
    assert loaded.get_contact(ContactType.EMAIL) == "a@b.com"


@pytest.mark.integration
@pytest.mark.parametrize("config", BACKENDS, ids=["array", "map"])
def test_full_lifecycle_with_sections(config):
    storage = get_storage(config)
    resume = Resume("Ivan Ivanov", "Moscow")
    resume.add_contact(ContactType.MAIL, "ivan@example.com")
    resume.add_text_section(SectionType.OBJECTIVE, "Lead developer")
    resume.add_organization_section(
        SectionType.EXPERIENCE,
        Organization.create("Test Company", "http://test.com", Period(2020, 1, 2023, 12, "Senior Developer")),
    )
    storage.save(resume)

    edited = storage.load(resume.uuid).value
    edited.add_text_section(SectionType.QUALIFICATIONS, "Python", "SQL")
    storage.update(edited)

    stored = storage.load(resume.uuid).value
    assert stored.get_section(SectionType.QUALIFICATIONS).items == ("Python", "SQL")
    assert stored.get_section(SectionType.EXPERIENCE).items[0].periods[0].title == "Senior Developer"

    storage.delete(resume.uuid)
    assert storage.load(resume.uuid).error is StorageErrorKind.NOT_FOUND
    assert storage.size() == 0


@pytest.mark.integration
def test_populate_storage_reports_rejections():
    storage = get_storage(StoreConfig(backend="array", capacity=2))
    records = [
        {"uuid": "a", "full_name": "Alice"},
        {"uuid": "a", "full_name": "Alice Again"},
        {"full_name": "   "},
        {"uuid": "b", "full_name": "Boris"},
        {"uuid": "c", "full_name": "Carol"},
    ]

    report = populate_storage(storage, records)

    assert report.saved == ["a", "b"]
    assert [index for index, _ in report.rejected] == [1, 2, 4]
    assert "already exists" in report.rejected[0][1]
    assert "full" in report.rejected[2][1]
    assert not report.success
