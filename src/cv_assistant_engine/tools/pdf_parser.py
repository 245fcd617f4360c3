"""PDF text extraction with a pdfplumber -> pypdf fallback chain."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from pathlib import Path

import structlog

from cv_assistant_core.constants import MIN_PDF_TEXT_CHARS
from cv_assistant_core.exceptions import EncryptedPDFError, InvalidFileError, ScannedPDFError

logger = structlog.get_logger()


def _is_password_error(error: Exception) -> bool:
    text = str(error).lower()
    return "password" in text or "encrypted" in text


class PDFParser:
    """Extract the text layer of a résumé PDF."""

    def __init__(self, min_text_chars: int = MIN_PDF_TEXT_CHARS) -> None:
        """Initialize with the minimum text length a strategy must yield."""
        self._min_text_chars = min_text_chars

    async def extract_text(self, path: Path) -> str:
        """Extract text from a PDF file.

        Tries pdfplumber first, then pypdf.

        Raises:
            InvalidFileError: If the file is missing or not a PDF.
            EncryptedPDFError: If the PDF is password-protected.
            ScannedPDFError: If no strategy finds a usable text layer.
        """
        self._validate_file(path)

        strategies: list[tuple[str, Callable[[Path], Awaitable[str | None]]]] = [
            ("pdfplumber", self._try_pdfplumber),
            ("pypdf", self._try_pypdf),
        ]
        for name, strategy in strategies:
            text = await strategy(path)
            if text and len(text.strip()) > self._min_text_chars:
                logger.debug("pdf_text_extracted", path=str(path), strategy=name, chars=len(text))
                return text

        msg = f"PDF appears to be scanned/image-only with no extractable text: {path}"
        raise ScannedPDFError(msg)

    def _validate_file(self, path: Path) -> None:
        if not path.exists():
            msg = f"File not found: {path}"
            raise InvalidFileError(msg)
        if path.suffix.lower() != ".pdf":
            msg = f"Expected PDF file, got: {path.suffix}"
            raise InvalidFileError(msg)

    async def _try_pdfplumber(self, path: Path) -> str | None:
        """Try extracting text with pdfplumber."""

        def _extract() -> str:
            import pdfplumber

            with pdfplumber.open(str(path)) as pdf:
                return "\n\n".join(t for t in (page.extract_text() for page in pdf.pages) if t)

        try:
            return await asyncio.to_thread(_extract)
        except Exception as e:
            if _is_password_error(e):
                msg = f"PDF is password-protected: {path}"
                raise EncryptedPDFError(msg) from e
            logger.debug("pdfplumber_fallback", error=str(e))
            return None

    async def _try_pypdf(self, path: Path) -> str | None:
        """Try extracting text with pypdf (lightweight fallback)."""

        def _extract() -> str:
            from pypdf import PdfReader

            reader = PdfReader(str(path))
            if reader.is_encrypted:
                msg = f"PDF is password-protected: {path}"
                raise EncryptedPDFError(msg)
            return "\n\n".join(t for t in (page.extract_text() for page in reader.pages) if t)

        try:
            return await asyncio.to_thread(_extract)
        except EncryptedPDFError:
            raise
        except Exception as e:
            logger.debug("pypdf_fallback", error=str(e))
            return None
