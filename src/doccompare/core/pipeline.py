"""Comparison pipeline: align -> expand -> pair modifications -> summarize"""

import logging
from typing import Optional

from doccompare.config import Settings
from doccompare.core.align import Aligner, align_lines, coerce_segments, validate_segments
from doccompare.core.expand import expand_segments
from doccompare.core.models import DiffResult, DocumentFile
from doccompare.core.pairing import DEFAULT_WINDOW, check_policy, synthesize_modifications
from doccompare.core.summary import summarize
from doccompare.core.utils.text import split_lines
from doccompare.errors import AlignmentError, MissingInputError


logger = logging.getLogger(__name__)


def compute_diff(
    original_text: Optional[str],
    modified_text: Optional[str],
    policy: str = "block",
    window: int = DEFAULT_WINDOW,
    aligner: Aligner = align_lines,
    ) -> DiffResult:
    """Compare two normalized texts line by line and return a new DiffResult.

    Raises MissingInputError if either text is None (empty strings are valid)
    and AlignmentError if the aligner fails or returns segments that do not
    reconstruct both inputs. An unknown policy or a window
    policy with window < 1 raises ValueError before any alignment work.
    Nothing is returned on failure.
    """
    if original_text is None or modified_text is None:
        raise MissingInputError("Both original and modified documents are required.")
    check_policy(policy, window)

    original_lines = split_lines(original_text)
    modified_lines = split_lines(modified_text)

    try:
        segments = coerce_segments(aligner(original_lines, modified_lines))
    except Exception as e:
        logger.error("Line alignment failed: %s", e)
        raise AlignmentError(f"Failed to compute differences: {e}") from e
    validate_segments(segments, original_lines, modified_lines)

    expanded = expand_segments(segments)
    changes = synthesize_modifications(expanded, policy=policy, window=window)
    summary = summarize(changes)
    logger.debug(
        "Compared %d/%d lines in %d segments: %d change(s) (%s pairing)",
        len(original_lines), len(modified_lines), len(segments), summary.total_changes, policy,
    )
    return DiffResult(changes=tuple(changes), summary=summary)


def compare_documents(
    original: Optional[DocumentFile],
    modified: Optional[DocumentFile],
    settings: Settings = None,
    ) -> DiffResult:
    """Compare two ingested documents using the configured pairing policy."""
    if original is None or modified is None:
        raise MissingInputError("Both original and modified documents are required.")
    settings = settings or Settings()
    result = compute_diff(
        original.content,
        modified.content,
        policy=settings.pairing_policy,
        window=settings.pairing_window,
    )
    return result.model_copy(update={"original": original, "modified": modified})
