"""Heuristic résumé extractor: raw text in, Profile out."""

from __future__ import annotations

import re
from collections.abc import Sequence

import structlog

from cv_assistant_core.constants import (
    COMPANY_SUFFIXES,
    DEGREE_EXCLUDED_MARKERS,
    DEGREE_LOOKBACK_LINES,
    DURATION_LOOKAHEAD_LINES,
    EDUCATION_SECTION_KEYWORDS,
    EDUCATION_WINDOW_LINES,
    INSTITUTION_MARKERS,
    NAME_SCAN_LINES,
    ONGOING_MARKERS,
    SKILL_VOCABULARY,
    TITLE_LOOKBACK_LINES,
    WORK_SECTION_KEYWORDS,
    WORK_WINDOW_LINES,
    YEAR_LOOKAHEAD_LINES,
)
from cv_assistant_core.models.profile import EducationEntry, Profile, WorkPosition
from cv_assistant_engine.scanning import BlockRule, normalize_lines, scan_blocks

logger = structlog.get_logger()

NAME_RE = re.compile(r"[A-Z][a-z]+ [A-Z][a-z]+")
EMAIL_RE = re.compile(r"\b[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}\b", re.IGNORECASE)
PHONE_RE = re.compile(r"(?:\+?1[-. ]?)?\(?[0-9]{3}\)?[-. ]?[0-9]{3}[-. ]?[0-9]{4}")
ALL_CAPS_RE = re.compile(r"[A-Z][A-Z\s&]+")
YEAR_RE = re.compile(r"[0-9]{4}")


def is_company_line(line: str) -> bool:
    """All-caps line, or one carrying a corporate suffix."""
    return bool(ALL_CAPS_RE.fullmatch(line)) or any(s in line for s in COMPANY_SUFFIXES)


def is_institution_line(line: str) -> bool:
    return any(marker in line for marker in INSTITUTION_MARKERS)


def is_degree_line(line: str) -> bool:
    return not any(marker in line for marker in DEGREE_EXCLUDED_MARKERS)


def is_duration_line(line: str) -> bool:
    return bool(YEAR_RE.search(line)) or any(m in line for m in ONGOING_MARKERS)


def is_year_line(line: str) -> bool:
    return bool(YEAR_RE.search(line))


WORK_RULE = BlockRule(
    section_keywords=WORK_SECTION_KEYWORDS,
    window=WORK_WINDOW_LINES,
    is_anchor=is_company_line,
    lookback=TITLE_LOOKBACK_LINES,
    is_label=lambda line: not is_company_line(line),
    lookahead=DURATION_LOOKAHEAD_LINES,
    is_detail=is_duration_line,
)

EDUCATION_RULE = BlockRule(
    section_keywords=EDUCATION_SECTION_KEYWORDS,
    window=EDUCATION_WINDOW_LINES,
    is_anchor=is_institution_line,
    lookback=DEGREE_LOOKBACK_LINES,
    is_label=is_degree_line,
    lookahead=YEAR_LOOKAHEAD_LINES,
    is_detail=is_year_line,
)


def extract(raw_text: str) -> Profile:
    """Extract a Profile from résumé text.

    Never raises: fields that cannot be found are left unset or empty.
    """
    lines = normalize_lines(raw_text)
    profile = Profile(
        name=extract_name(lines),
        email=extract_email(raw_text),
        phone=extract_phone(raw_text),
        positions=tuple(extract_positions(lines)),
        skills=tuple(extract_skills(raw_text)),
        education=tuple(extract_education(lines)),
        raw_text=raw_text,
    )
    logger.debug(
        "profile_extracted",
        lines=len(lines),
        has_name=profile.name is not None,
        positions=len(profile.positions),
        skills=len(profile.skills),
        education=len(profile.education),
    )
    return profile


def extract_name(lines: Sequence[str]) -> str | None:
    """Return the first of the top lines shaped like 'First Last'."""
    for line in lines[:NAME_SCAN_LINES]:
        if NAME_RE.match(line) and "@" not in line:
            return line
    return None


def extract_email(text: str) -> str | None:
    match = EMAIL_RE.search(text)
    return match.group() if match else None


def extract_phone(text: str) -> str | None:
    match = PHONE_RE.search(text)
    return match.group() if match else None


def extract_positions(lines: Sequence[str]) -> list[WorkPosition]:
    """Pair company lines in work sections with the title line above them."""
    return [
        WorkPosition(title=m.label, company=m.anchor, duration=m.detail)
        for m in scan_blocks(lines, WORK_RULE)
    ]


def extract_skills(text: str) -> list[str]:
    """Return vocabulary keywords present in the text, in vocabulary order."""
    return [skill for skill in SKILL_VOCABULARY if skill in text]


def extract_education(lines: Sequence[str]) -> list[EducationEntry]:
    """Pair institution lines in education sections with the degree line above them."""
    return [
        EducationEntry(degree=m.label, institution=m.anchor, year=m.detail)
        for m in scan_blocks(lines, EDUCATION_RULE)
    ]
