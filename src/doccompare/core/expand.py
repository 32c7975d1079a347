"""Flatten aligned segments into one Change per line"""

from typing import Iterable

from doccompare.core.models import Added, Change, Removed, Segment, SegmentTag, Unchanged


def expand_segments(segments: Iterable[Segment]) -> list[Change]:
    """Emit one Change per line, numbering each side independently from 1.

    equal lines advance both cursors, inserted lines only the modified cursor,
    deleted lines only the original cursor. Order is preserved exactly.
    """
    changes: list[Change] = []
    original_line = modified_line = 1

    for segment in segments:
        for text in segment.lines:
            if segment.tag == SegmentTag.equal:
                changes.append(Unchanged(original_line=original_line, modified_line=modified_line, text=text))
                original_line += 1
                modified_line += 1
            elif segment.tag == SegmentTag.inserted:
                changes.append(Added(modified_line=modified_line, modified_text=text))
                modified_line += 1
            else:
                changes.append(Removed(original_line=original_line, original_text=text))
                original_line += 1

    return changes
