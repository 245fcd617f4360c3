"""One caller's résumé session: load, extract, then answer questions."""

from __future__ import annotations

import time
from pathlib import Path
from uuid import uuid4

import structlog

from cv_assistant_core.models.profile import Profile
from cv_assistant_engine.answerer import Answerer
from cv_assistant_engine.extractor import extract
from cv_assistant_engine.tools.document_loader import DocumentLoader

logger = structlog.get_logger()


def describe_parse(profile: Profile) -> str:
    """Summary line reported after a successful parse."""
    return (
        f"CV parsed successfully. Found {len(profile.positions)} positions "
        f"and {len(profile.skills)} skills."
    )


class ResumeSession:
    """Owns the loader and the answerer for a single caller.

    Each new parse replaces the profile questions are answered against.
    """

    def __init__(
        self,
        loader: DocumentLoader | None = None,
        answerer: Answerer | None = None,
    ) -> None:
        """Initialize with optional collaborators."""
        self.session_id = uuid4().hex[:12]
        self._loader = loader or DocumentLoader()
        self._answerer = answerer or Answerer()

    @property
    def profile(self) -> Profile | None:
        return self._answerer.profile

    async def load(self, path: Path) -> Profile:
        """Read a .pdf or .txt résumé and make it the current profile."""
        logger.info("parse_start", session_id=self.session_id, path=str(path))
        start = time.monotonic()
        raw_text = await self._loader.load(path)
        profile = self.parse_text(raw_text)
        logger.info(
            "parse_end",
            session_id=self.session_id,
            duration_seconds=round(time.monotonic() - start, 2),
            positions=len(profile.positions),
            skills=len(profile.skills),
            education=len(profile.education),
        )
        return profile

    def parse_text(self, raw_text: str) -> Profile:
        """Extract a profile from raw text and make it the current profile."""
        profile = extract(raw_text)
        self._answerer.set_profile(profile)
        return profile

    def ask(self, question: str) -> str:
        """Answer a question about the current profile.

        Raises:
            NoProfileError: If nothing has been parsed yet.
        """
        return self._answerer.ask(question)
