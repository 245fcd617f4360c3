"""Turn a résumé file into raw text."""

from __future__ import annotations

import asyncio
from pathlib import Path

import structlog

from cv_assistant_core.constants import MAX_DOCUMENT_SIZE_MB, SUPPORTED_DOCUMENT_SUFFIXES
from cv_assistant_core.exceptions import InvalidFileError, UnsupportedFormatError
from cv_assistant_engine.tools.pdf_parser import PDFParser

logger = structlog.get_logger()


class DocumentLoader:
    """Load PDF or plain-text résumés."""

    def __init__(
        self,
        pdf_parser: PDFParser | None = None,
        max_size_mb: float = MAX_DOCUMENT_SIZE_MB,
    ) -> None:
        """Initialize with an optional PDF parser and size warning threshold."""
        self._pdf_parser = pdf_parser or PDFParser()
        self._max_size_mb = max_size_mb

    async def load(self, path: Path) -> str:
        """Return the text content of a .pdf or .txt document.

        Raises:
            UnsupportedFormatError: If the extension is not .pdf or .txt.
            InvalidFileError: If the file is missing or not valid UTF-8 text.
        """
        suffix = path.suffix.lower()
        if suffix not in SUPPORTED_DOCUMENT_SUFFIXES:
            msg = "Unsupported file format. Please use PDF or TXT files."
            raise UnsupportedFormatError(msg)
        if not path.is_file():
            msg = f"File not found: {path}"
            raise InvalidFileError(msg)
        self._check_size(path)

        if suffix == ".pdf":
            text = await self._pdf_parser.extract_text(path)
        else:
            text = await asyncio.to_thread(self._read_text, path)

        logger.info("document_loaded", path=str(path), format=suffix.lstrip("."), chars=len(text))
        return text

    def _check_size(self, path: Path) -> None:
        """Warn if the document is larger than the configured threshold."""
        size_mb = path.stat().st_size / (1024 * 1024)
        if size_mb > self._max_size_mb:
            logger.warning("large_document", path=str(path), size_mb=round(size_mb, 1))

    @staticmethod
    def _read_text(path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            msg = f"Text file is not valid UTF-8: {path}"
            raise InvalidFileError(msg) from e
