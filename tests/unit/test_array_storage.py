"""
Unit tests for the bounded array backend.

Covers the capacity ceiling and slot compaction, which the map backend does not have.
"""

import pytest

from dossier.contexts.modeling import Resume
from dossier.contexts.storage import (
    DEFAULT_CAPACITY,
    ArrayStorage,
    CapacityExceededError,
    StorageErrorKind,
)


@pytest.mark.unit
def test_default_capacity():
    assert ArrayStorage().capacity == DEFAULT_CAPACITY == 100


@pytest.mark.unit
@pytest.mark.parametrize("capacity", [0, -1])
def test_non_positive_capacity_is_rejected(capacity):
    with pytest.raises(ValueError, match="Capacity must be positive"):
        ArrayStorage(capacity=capacity)


@pytest.mark.unit
def test_accepts_exactly_capacity_resumes():
    storage = ArrayStorage(capacity=3)
    for i in range(3):
        assert storage.save(Resume(f"Person {i}", "X")).success

    result = storage.save(Resume("One Too Many", "X"))

    assert result.error is StorageErrorKind.CAPACITY_EXCEEDED
    assert "full" in result.message
    assert storage.size() == 3
    with pytest.raises(CapacityExceededError):
        result.unwrap()


@pytest.mark.unit
def test_delete_frees_a_slot():
    storage = ArrayStorage(capacity=2)
    first = Resume("Alice", "X")
    storage.save(first)
    storage.save(Resume("Boris", "X"))

    storage.delete(first.uuid)

    assert storage.save(Resume("Carol", "X")).success
    assert storage.save(Resume("Dmitry", "X")).error is StorageErrorKind.CAPACITY_EXCEEDED


@pytest.mark.unit
def test_capacity_holds_across_delete_and_save_history():
    storage = ArrayStorage(capacity=4)
    live = [Resume(f"Person {i}", "X") for i in range(4)]
    for resume in live:
        storage.save(resume)

    for round_number in range(5):
        storage.delete(live[round_number % 4].uuid)
        replacement = Resume(f"Round {round_number}", "X")
        assert storage.save(replacement).success
        live[round_number % 4] = replacement
        assert storage.save(Resume("Overflow", "X")).error is StorageErrorKind.CAPACITY_EXCEEDED

    assert storage.size() == 4


@pytest.mark.unit
def test_duplicate_reported_before_capacity():
    storage = ArrayStorage(capacity=1)
    resume = Resume("Alice", "X")
    storage.save(resume)

    assert storage.save(resume).error is StorageErrorKind.DUPLICATE_ID


@pytest.mark.unit
def test_delete_compacts_remaining_entries():
    storage = ArrayStorage(capacity=5)
    resumes = [Resume(name, "X") for name in ("Alice", "Boris", "Carol")]
    for resume in resumes:
        storage.save(resume)

    storage.delete(resumes[0].uuid)

    for resume in resumes[1:]:
        assert storage.load(resume.uuid).value == resume
    assert [r.full_name for r in storage.get_all_sorted()] == ["Boris", "Carol"]
    assert storage.delete(resumes[0].uuid).error is StorageErrorKind.NOT_FOUND


@pytest.mark.unit
def test_clear_restores_full_capacity():
    storage = ArrayStorage(capacity=2)
    storage.save(Resume("Alice", "X"))
    storage.save(Resume("Boris", "X"))

    storage.clear()

    assert storage.save(Resume("Carol", "X")).success
    assert storage.save(Resume("Dmitry", "X")).success
    assert storage.size() == 2
