"""Domain models for cv-assistant."""

from cv_assistant_core.models.profile import EducationEntry, Profile, WorkPosition

__all__ = [
    "EducationEntry",
    "Profile",
    "WorkPosition",
]
