"""Résumé profile models produced by extraction."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from cv_assistant_core.constants import SKILL_VOCABULARY


class WorkPosition(BaseModel):
    """A job held by the candidate."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(min_length=1, description="Job title line")
    company: str = Field(min_length=1, description="Company line")
    duration: str | None = Field(default=None, description="Line carrying the date range")
    description: str | None = Field(default=None, description="Free-text description")


class EducationEntry(BaseModel):
    """A degree obtained at an institution."""

    model_config = ConfigDict(frozen=True)

    degree: str = Field(min_length=1, description="Degree line")
    institution: str = Field(min_length=1, description="University/college line")
    year: str | None = Field(default=None, description="Line carrying the year")


class Profile(BaseModel):
    """Structured representation of a résumé.

    Built once per extraction and never modified afterwards. Sequences are
    tuples so the frozen model cannot be mutated through them either.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str | None = Field(default=None, description="Best-effort full name")
    email: str | None = Field(default=None, description="First email address found")
    phone: str | None = Field(default=None, description="First phone number found")
    positions: tuple[WorkPosition, ...] = Field(
        default=(), description="Work positions in document order"
    )
    skills: tuple[str, ...] = Field(default=(), description="Recognized skills in vocabulary order")
    education: tuple[EducationEntry, ...] = Field(
        default=(), description="Education entries in document order"
    )
    raw_text: str = Field(default="", alias="rawText", description="Original document text")

    @model_validator(mode="after")
    def validate_skills_vocabulary(self) -> Profile:
        """Ensure every skill belongs to the recognized vocabulary."""
        unknown = [s for s in self.skills if s not in SKILL_VOCABULARY]
        if unknown:
            msg = f"skills outside the recognized vocabulary: {', '.join(unknown)}"
            raise ValueError(msg)
        return self

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready dict callers exchange, unset fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
