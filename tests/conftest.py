"""Shared fixtures for storage and modeling tests."""

import pytest

from dossier.contexts.modeling import ContactType, Resume
from dossier.contexts.storage import ArrayStorage, MapStorage


@pytest.fixture(params=["array", "map"])
def storage(request):
    """Each contract test runs once against every backend."""
    if request.param == "array":
        return ArrayStorage(capacity=100)
    return MapStorage()


@pytest.fixture
def make_resume():
    """Factory building a resume with a mail contact derived from the name."""

    def _make(full_name: str = "Bob Smith", location: str = "NYC", uuid: str = None) -> Resume:
        resume = Resume(full_name, location, uuid=uuid)
        resume.add_contact(
            ContactType.MAIL, full_name.lower().replace(" ", ".") + "@example.com"
        )
        return resume

    return _make
