"""Tests for intent classification and answering."""

from __future__ import annotations

import pytest

from cv_assistant_core.exceptions import NoProfileError
from cv_assistant_core.models.profile import Profile
from cv_assistant_engine.answerer import (
    FALLBACK_ANSWER,
    INTENTS,
    Answerer,
    answer,
    classify,
)
from tests.mocks.mock_factories import make_education, make_position, make_profile


@pytest.mark.unit
class TestClassify:
    """Test ordered, first-match-wins classification."""

    @pytest.mark.parametrize(
        ("question", "intent"),
        [
            ("What was my last position?", "last_position"),
            ("What was my LAST ROLE?", "last_position"),
            ("What is my current position?", "last_position"),
            ("Summarize my experience", "experience"),
            ("List my positions", "experience"),
            ("What skills do I have?", "skills"),
            ("Which technology stacks?", "skills"),
            ("Tell me about my education", "education"),
            ("What degree do I hold?", "education"),
            ("How can I be contacted?", "contact"),
            ("What's my email?", "contact"),
            ("Phone number please", "contact"),
        ],
    )
    def test_intent_triggers(self, question: str, intent: str) -> None:
        """Each trigger phrase selects its intent."""
        matched = classify(question)
        assert matched is not None
        assert matched.name == intent

    def test_no_match(self) -> None:
        """Unrelated questions match nothing."""
        assert classify("What is the weather like?") is None

    def test_priority_experience_over_skills(self) -> None:
        """A question mentioning both experience and skills is about experience."""
        matched = classify("What skills and experience do I have?")
        assert matched is not None
        assert matched.name == "experience"

    def test_priority_last_position_over_experience(self) -> None:
        """'last position' outranks the plural 'positions' trigger."""
        matched = classify("Of all my positions, what was my last position?")
        assert matched is not None
        assert matched.name == "last_position"

    def test_priority_education_over_contact(self) -> None:
        """Education is checked before contact details."""
        matched = classify("Which email did my degree use?")
        assert matched is not None
        assert matched.name == "education"

    def test_table_order(self) -> None:
        """Intent table is in documented priority order."""
        assert [i.name for i in INTENTS] == [
            "last_position",
            "experience",
            "skills",
            "education",
            "contact",
        ]


@pytest.mark.unit
class TestAnswer:
    """Test answer templates."""

    def test_last_position(self) -> None:
        """Last position without duration ends with a period."""
        profile = Profile(positions=(make_position(title="Engineer", company="ACME", duration=None),))
        assert answer(profile, "What was my last position?") == (
            "Your last position was Engineer at ACME."
        )

    def test_last_position_with_duration(self, sample_profile: Profile) -> None:
        """Duration is appended in parentheses."""
        assert answer(sample_profile, "What was my last role?") == (
            "Your last position was Senior Engineer at ACME CORP (2019 - Present)."
        )

    def test_experience(self, sample_profile: Profile) -> None:
        """All positions are joined with commas."""
        assert answer(sample_profile, "Tell me about my experience") == (
            "Your work experience includes: Senior Engineer at ACME CORP (2019 - Present), "
            "Software Developer at Globex Inc (2015 - 2019)"
        )

    def test_skills(self, sample_profile: Profile) -> None:
        """Skills are joined in profile order."""
        assert answer(sample_profile, "What are my skills?") == (
            "Your skills include: Python, Docker, AWS"
        )

    def test_education(self) -> None:
        """Education entries include the year when known."""
        profile = make_profile(
            education=(make_education(), make_education(degree="MSc", year=None)),
        )
        assert answer(profile, "What is my education?") == (
            "Your education includes: Bachelor of Science from State University (2015), "
            "MSc from State University"
        )

    def test_contact(self, sample_profile: Profile) -> None:
        """Email and phone are both reported."""
        assert answer(sample_profile, "What is my contact info?") == (
            "Your contact information: Email: jane.doe@example.com, Phone: (555) 123-4567"
        )

    def test_contact_phone_only(self) -> None:
        """Missing email is left out."""
        profile = make_profile(email=None)
        assert answer(profile, "phone?") == "Your contact information: Phone: (555) 123-4567"

    @pytest.mark.parametrize(
        ("question", "expected"),
        [
            ("What was my last position?", "I couldn't find any work positions in your CV."),
            ("What experience do I have?", "I couldn't find any work experience in your CV."),
            ("What are my skills?", "I couldn't find any specific skills listed in your CV."),
            ("What degree?", "I couldn't find any education information in your CV."),
            ("My email?", "I couldn't find any contact information in your CV."),
        ],
    )
    def test_not_found_messages(self, empty_profile: Profile, question: str, expected: str) -> None:
        """Empty sections give the intent's not-found message."""
        assert answer(empty_profile, question) == expected

    def test_fallback(self, sample_profile: Profile) -> None:
        """Unclassified questions get the fixed fallback."""
        assert answer(sample_profile, "Do you like pizza?") == FALLBACK_ANSWER

    def test_priority_answer(self, sample_profile: Profile) -> None:
        """Mixed question is answered with the experience template."""
        result = answer(sample_profile, "What skills and experience do I have?")
        assert result.startswith("Your work experience includes:")

    def test_does_not_mutate_profile(self, sample_profile: Profile) -> None:
        """Answering leaves the profile unchanged."""
        before = sample_profile.model_dump()
        for question in ("last role", "experience", "skills", "degree", "email", "other"):
            answer(sample_profile, question)
        assert sample_profile.model_dump() == before


@pytest.mark.unit
class TestAnswerer:
    """Test the profile-holding Answerer."""

    def test_ask_without_profile_raises(self) -> None:
        """Fresh answerer has nothing to answer about."""
        with pytest.raises(NoProfileError, match="parse a CV first"):
            Answerer().ask("What are my skills?")

    def test_seeded_profile(self, sample_profile: Profile) -> None:
        """Profile given at construction is used."""
        assert Answerer(sample_profile).ask("skills?") == "Your skills include: Python, Docker, AWS"

    def test_set_profile_replaces(self, sample_profile: Profile) -> None:
        """A new profile replaces the previous one."""
        answerer = Answerer(sample_profile)
        replacement = make_profile(skills=("Rust",))
        answerer.set_profile(replacement)
        assert answerer.profile is replacement
        assert answerer.ask("skills?") == "Your skills include: Rust"

    def test_clear(self, sample_profile: Profile) -> None:
        """Cleared answerer raises again."""
        answerer = Answerer(sample_profile)
        answerer.clear()
        assert answerer.profile is None
        with pytest.raises(NoProfileError):
            answerer.ask("skills?")
