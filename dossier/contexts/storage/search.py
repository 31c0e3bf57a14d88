"""
Search helpers over a storage snapshot.

Both functions work on get_all_sorted(), so results are copies in natural order.
Matching is case-insensitive substring matching.
"""

from typing import List, Optional

from dossier.contexts.modeling.nomenclature import ContactType
from dossier.contexts.modeling.resume_data_structure import Resume
from dossier.contexts.storage.contract import ResumeStorage


def _contains(haystack: Optional[str], needle: str) -> bool:
    return haystack is not None and needle.lower() in haystack.lower()


def search_resumes(storage: ResumeStorage, query: str) -> List[Resume]:
    """
    Find resumes whose full name or location contains query.

    An empty query matches everything.
    """
    return [
        resume
        for resume in storage.get_all_sorted()
        if _contains(resume.full_name, query) or _contains(resume.location, query)
    ]


def filter_resumes(
    storage: ResumeStorage,
    name: Optional[str] = None,
    location: Optional[str] = None,
    email: Optional[str] = None,
) -> List[Resume]:
    """
    Find resumes matching every given filter (filters left as None are ignored).

    Args:
        storage: Backend to read from
        name: Substring of the full name
        location: Substring of the location
        email: Substring of the MAIL contact; resumes without one never match
    """
    results = []
    for resume in storage.get_all_sorted():
        if name is not None and not _contains(resume.full_name, name):
            continue
        if location is not None and not _contains(resume.location, location):
            continue
        if email is not None and not _contains(resume.get_contact(ContactType.MAIL), email):
            continue
        results.append(resume)
    return results
