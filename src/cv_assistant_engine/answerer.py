"""Question answering over an extracted Profile.

Questions are classified by the first intent whose trigger phrase occurs in
the lower-cased question. The table order is the priority order: a question
mentioning both "experience" and "skill" is answered as experience.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import structlog

from cv_assistant_core.exceptions import NoProfileError
from cv_assistant_core.models.profile import EducationEntry, Profile, WorkPosition

logger = structlog.get_logger()

FALLBACK_ANSWER = (
    "I can answer questions about your work experience, skills, education, "
    "and contact information. Please ask a specific question about your CV."
)


@dataclass(frozen=True)
class Intent:
    """A question category: trigger phrases and the handler answering it."""

    name: str
    triggers: tuple[str, ...]
    respond: Callable[[Profile], str]

    def matches(self, question: str) -> bool:
        lowered = question.lower()
        return any(trigger in lowered for trigger in self.triggers)


def _suffix(value: str | None) -> str:
    return f" ({value})" if value else ""


def _describe_position(position: WorkPosition) -> str:
    return f"{position.title} at {position.company}{_suffix(position.duration)}"


def _describe_education(entry: EducationEntry) -> str:
    return f"{entry.degree} from {entry.institution}{_suffix(entry.year)}"


def _answer_last_position(profile: Profile) -> str:
    if not profile.positions:
        return "I couldn't find any work positions in your CV."
    # The first position found is the most recent one on a conventional résumé
    return f"Your last position was {_describe_position(profile.positions[0])}."


def _answer_experience(profile: Profile) -> str:
    if not profile.positions:
        return "I couldn't find any work experience in your CV."
    described = ", ".join(_describe_position(p) for p in profile.positions)
    return f"Your work experience includes: {described}"


def _answer_skills(profile: Profile) -> str:
    if not profile.skills:
        return "I couldn't find any specific skills listed in your CV."
    return f"Your skills include: {', '.join(profile.skills)}"


def _answer_education(profile: Profile) -> str:
    if not profile.education:
        return "I couldn't find any education information in your CV."
    described = ", ".join(_describe_education(e) for e in profile.education)
    return f"Your education includes: {described}"


def _answer_contact(profile: Profile) -> str:
    contact: list[str] = []
    if profile.email:
        contact.append(f"Email: {profile.email}")
    if profile.phone:
        contact.append(f"Phone: {profile.phone}")
    if not contact:
        return "I couldn't find any contact information in your CV."
    return f"Your contact information: {', '.join(contact)}"


INTENTS: tuple[Intent, ...] = (
    Intent(
        name="last_position",
        triggers=("last position", "last role", "current position"),
        respond=_answer_last_position,
    ),
    Intent(
        name="experience",
        triggers=("experience", "positions"),
        respond=_answer_experience,
    ),
    Intent(
        name="skills",
        triggers=("skill", "technology"),
        respond=_answer_skills,
    ),
    Intent(
        name="education",
        triggers=("education", "degree"),
        respond=_answer_education,
    ),
    Intent(
        name="contact",
        triggers=("contact", "email", "phone"),
        respond=_answer_contact,
    ),
)


def classify(question: str, intents: tuple[Intent, ...] = INTENTS) -> Intent | None:
    """Return the first intent triggered by the question, or None."""
    for intent in intents:
        if intent.matches(question):
            return intent
    return None


def answer(profile: Profile, question: str) -> str:
    """Answer a question about ``profile``. Never mutates the profile."""
    intent = classify(question)
    logger.debug("question_answered", intent=intent.name if intent else "fallback")
    if intent is None:
        return FALLBACK_ANSWER
    return intent.respond(profile)


class Answerer:
    """Holds the most recently extracted Profile and answers questions about it."""

    def __init__(self, profile: Profile | None = None) -> None:
        """Initialize, optionally seeded with a profile."""
        self._profile = profile

    @property
    def profile(self) -> Profile | None:
        return self._profile

    def set_profile(self, profile: Profile) -> None:
        """Replace the held profile."""
        self._profile = profile

    def clear(self) -> None:
        self._profile = None

    def ask(self, question: str) -> str:
        """Answer a question about the held profile.

        Raises:
            NoProfileError: If no profile has been set.
        """
        if self._profile is None:
            msg = "No CV data available. Please parse a CV first."
            raise NoProfileError(msg)
        return answer(self._profile, question)
