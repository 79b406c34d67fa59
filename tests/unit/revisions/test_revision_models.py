"""Tests for revision models."""

import pytest
from pydantic import ValidationError

from revisionist.revisions.models import RevisionRecord, ValueSide
from tests.factories.revisions import make_record


class TestRevisionRecord:
    """Tests for RevisionRecord."""

    def test_value_by_side(self) -> None:
        record = make_record(old_value="draft", new_value="published")
        assert record.value(ValueSide.OLD) == "draft"
        assert record.value("new") == "published"

    def test_invalid_side(self) -> None:
        with pytest.raises(ValueError):
            make_record().value("middle")

    def test_stored_value_types_preserved(self) -> None:
        record = make_record(old_value="42", new_value=42)
        assert record.old_value == "42"
        assert record.new_value == 42

    def test_record_is_frozen(self) -> None:
        record = make_record()
        with pytest.raises(ValidationError):
            record.field = "other"

    def test_field_required(self) -> None:
        with pytest.raises(ValidationError):
            RevisionRecord(entity_type="posts", entity_id=1, field="")

    def test_created_at_defaults_to_now(self) -> None:
        record = RevisionRecord(entity_type="posts", entity_id=1, field="status")
        assert record.created_at.tzinfo is not None
