"""Document ingestion: upload validation and txt/md/docx/pdf text extraction"""

import io
import logging
from pathlib import Path
from typing import Callable, Iterator, Optional

import docx
import fitz
from docx.table import Table

from doccompare.config import Settings
from doccompare.core.models import DocumentFile, FileType, ParseResult
from doccompare.core.utils.sizes import format_file_size
from doccompare.core.utils.text import count_lines, normalize_text
from doccompare.errors import ParseError, UploadError


logger = logging.getLogger(__name__)


def get_file_type(name: str) -> Optional[FileType]:
    """Return the FileType for a filename's extension, or None if unsupported."""
    suffix = Path(name).suffix.lower().lstrip('.')
    try:
        return FileType(suffix)
    except ValueError:
        return None


def _result(raw: str) -> ParseResult:
    content = normalize_text(raw)
    return ParseResult(content=content, line_count=count_lines(content))


def parse_text(data: bytes) -> ParseResult:
    """Decode a plain text or markdown file as UTF-8 (a leading BOM is dropped)."""
    return _result(data.decode('utf-8-sig'))


def _docx_blocks(container) -> Iterator[str]:
    """Yield paragraph texts in document order, descending into table cells.

    A merged cell is repeated across the grid positions it spans; it is read once.
    """
    for block in container.iter_inner_content():
        if isinstance(block, Table):
            for row in block.rows:
                seen = []
                for cell in row.cells:
                    if any(cell._tc is tc for tc in seen):
                        continue
                    seen.append(cell._tc)
                    yield from _docx_blocks(cell)
        else:
            yield block.text


def parse_docx(data: bytes) -> ParseResult:
    """Extract raw text from a DOCX file, one blank line between paragraphs and table cells."""
    document = docx.Document(io.BytesIO(data))
    raw = "\n\n".join(_docx_blocks(document))
    if not raw.strip():
        raise ValueError("No text content extracted from DOCX")
    return _result(raw)


def parse_pdf(data: bytes) -> ParseResult:
    """Extract text from a PDF, one line per page with pages separated by a blank line."""
    with fitz.open(stream=data, filetype="pdf") as pdf:
        pages = [" ".join(page.get_text().split()) for page in pdf]
    return _result("\n\n".join(pages))


PARSERS: dict[FileType, Callable[[bytes], ParseResult]] = {
    FileType.txt: parse_text,
    FileType.md: parse_text,
    FileType.docx: parse_docx,
    FileType.pdf: parse_pdf,
}


def parse_bytes(name: str, data: bytes) -> ParseResult:
    """Dispatch to the format-specific parser for name; wraps any failure in ParseError."""
    file_type = get_file_type(name)
    if file_type is None:
        raise ParseError("Unsupported file type", FileType.txt.value)

    try:
        return PARSERS[file_type](data)
    except Exception as e:
        logger.debug("Parser for %s failed", name, exc_info=True)
        raise ParseError(f"Failed to parse {file_type.value.upper()} file {name}: {e}", file_type.value) from e


def validate_upload(name: str, size: int, settings: Settings) -> FileType:
    """Check extension and size against settings; raise UploadError on rejection."""
    extension = Path(name).suffix.lower()
    file_type = get_file_type(name)
    if extension not in settings.supported_types or file_type is None:
        raise UploadError(
            "INVALID_TYPE",
            f'File type "{extension}" is not supported. '
            f'Please upload {", ".join(settings.supported_types)} files.',
        )
    if size > settings.max_file_size_bytes:
        raise UploadError(
            "FILE_TOO_LARGE",
            f"File size ({format_file_size(size)}) exceeds the {settings.max_file_size_mb} MB limit.",
        )
    return file_type


def load_document(path: Path, settings: Settings) -> DocumentFile:
    """Validate, read, and parse a file from disk into a DocumentFile."""
    size = path.stat().st_size
    file_type = validate_upload(path.name, size, settings)
    parsed = parse_bytes(path.name, path.read_bytes())
    logger.info("Loaded %s (%s, %d lines)", path.name, format_file_size(size), parsed.line_count)
    return DocumentFile(
        name=path.name,
        content=parsed.content,
        file_type=file_type,
        size=size,
        line_count=parsed.line_count,
    )
