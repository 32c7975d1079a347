"""Line splitting and text normalization shared by ingestion and the diff engine"""

import re


BLANK_RUN_RE = re.compile(r'\n{3,}')


def split_lines(text: str) -> list[str]:
    """Split text on '\\n'. Empty text has no lines; a trailing newline yields a final empty line."""
    return text.split('\n') if text else []


def count_lines(text: str) -> int:
    """Return the number of lines in text, consistent with split_lines (0 for empty)."""
    return len(split_lines(text))


def normalize_text(text: str) -> str:
    """Normalize extracted text for consistent diffing.

    Converts CRLF/CR line endings to LF, strips trailing whitespace from each
    line, collapses three or more consecutive newlines to two, and trims the
    whole text.
    """
    text = text.replace('\r\n', '\n').replace('\r', '\n')
    text = '\n'.join(line.rstrip() for line in text.split('\n'))
    return BLANK_RUN_RE.sub('\n\n', text).strip()
