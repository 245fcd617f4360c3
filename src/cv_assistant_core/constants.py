"""Shared constants for cv-assistant."""

from __future__ import annotations

# Closed skill vocabulary, in reporting order. Matched as raw,
# case-sensitive substrings of the document.
SKILL_VOCABULARY: tuple[str, ...] = (
    "JavaScript",
    "Python",
    "Java",
    "C++",
    "C#",
    "React",
    "Node.js",
    "Angular",
    "Vue.js",
    "TypeScript",
    "PHP",
    "Ruby",
    "Go",
    "Rust",
    "Swift",
    "Kotlin",
    "Docker",
    "Kubernetes",
    "AWS",
    "Azure",
    "GCP",
    "MongoDB",
    "PostgreSQL",
    "MySQL",
    "Redis",
    "GraphQL",
    "REST",
    "API",
    "Git",
    "GitHub",
    "CI/CD",
    "Agile",
    "Scrum",
    "JIRA",
    "Confluence",
    "Figma",
    "Adobe",
    "Photoshop",
)

# Name guess is limited to the top of the document
NAME_SCAN_LINES = 5

# Work history section detection
WORK_SECTION_KEYWORDS: tuple[str, ...] = (
    "experience",
    "work",
    "employment",
    "job",
    "position",
    "role",
)
WORK_WINDOW_LINES = 10
TITLE_LOOKBACK_LINES = 3
DURATION_LOOKAHEAD_LINES = 3
COMPANY_SUFFIXES: tuple[str, ...] = ("Inc", "Corp", "LLC", "Ltd")
ONGOING_MARKERS: tuple[str, ...] = ("Present", "Current")

# Education section detection
EDUCATION_SECTION_KEYWORDS: tuple[str, ...] = (
    "education",
    "degree",
    "university",
    "college",
    "bachelor",
    "master",
    "phd",
)
EDUCATION_WINDOW_LINES = 5
DEGREE_LOOKBACK_LINES = 2
YEAR_LOOKAHEAD_LINES = 3
INSTITUTION_MARKERS: tuple[str, ...] = ("University", "College", "Institute", "School")
# Lines carrying these are never taken as the degree
DEGREE_EXCLUDED_MARKERS: tuple[str, ...] = ("University", "College")

# Document loading
SUPPORTED_DOCUMENT_SUFFIXES: tuple[str, ...] = (".pdf", ".txt")
MAX_DOCUMENT_SIZE_MB = 10
MIN_PDF_TEXT_CHARS = 50
