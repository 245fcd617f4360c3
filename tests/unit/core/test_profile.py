"""Tests for profile domain models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cv_assistant_core.models.profile import EducationEntry, Profile, WorkPosition
from tests.mocks.mock_factories import make_position, make_profile


@pytest.mark.unit
class TestWorkPosition:
    """Test WorkPosition model."""

    def test_minimal_position(self) -> None:
        """Title and company are enough."""
        p = WorkPosition(title="Engineer", company="ACME")
        assert p.duration is None
        assert p.description is None

    def test_empty_title_raises(self) -> None:
        """Empty title is rejected."""
        with pytest.raises(ValidationError):
            WorkPosition(title="", company="ACME")

    def test_frozen(self) -> None:
        """Positions cannot be modified after creation."""
        p = make_position()
        with pytest.raises(ValidationError):
            p.title = "Other"  # type: ignore[misc]


@pytest.mark.unit
class TestEducationEntry:
    """Test EducationEntry model."""

    def test_valid_entry(self) -> None:
        """Degree with institution and year."""
        e = EducationEntry(degree="BSc", institution="MIT University", year="2015")
        assert e.year == "2015"

    def test_empty_institution_raises(self) -> None:
        """Empty institution is rejected."""
        with pytest.raises(ValidationError):
            EducationEntry(degree="BSc", institution="")


@pytest.mark.unit
class TestProfile:
    """Test Profile model."""

    def test_defaults_are_empty(self) -> None:
        """A bare profile has nothing set."""
        p = Profile()
        assert p.name is None
        assert p.email is None
        assert p.phone is None
        assert p.positions == ()
        assert p.skills == ()
        assert p.education == ()
        assert p.raw_text == ""

    def test_accepts_raw_text_alias(self) -> None:
        """rawText alias populates raw_text."""
        p = Profile(rawText="hello")  # type: ignore[call-arg]
        assert p.raw_text == "hello"

    def test_unknown_skill_raises(self) -> None:
        """Skills outside the vocabulary are rejected."""
        with pytest.raises(ValidationError, match="outside the recognized vocabulary"):
            Profile(skills=("Python", "Cobol"))

    def test_frozen(self) -> None:
        """Profile fields cannot be reassigned."""
        p = make_profile()
        with pytest.raises(ValidationError):
            p.name = "Someone Else"  # type: ignore[misc]

    def test_payload_uses_wire_names(self) -> None:
        """Payload keys match the names callers already consume."""
        payload = make_profile().to_payload()
        assert set(payload) == {
            "name",
            "email",
            "phone",
            "positions",
            "skills",
            "education",
            "rawText",
        }
        assert payload["positions"][0] == {
            "title": "Senior Engineer",
            "company": "ACME CORP",
            "duration": "2019 - Present",
        }
        assert payload["skills"] == ["Python", "Docker", "AWS"]

    def test_payload_omits_unset_fields(self) -> None:
        """Unset optional fields are left out of the payload."""
        payload = Profile(raw_text="x").to_payload()
        assert "name" not in payload
        assert "email" not in payload
        assert "phone" not in payload
        assert payload["positions"] == []
