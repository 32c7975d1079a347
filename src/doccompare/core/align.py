"""Line alignment: adapt difflib opcodes into equal/inserted/deleted segments"""

import difflib
import logging
from typing import Callable, Iterable, Sequence, Union

from doccompare.core.models import Segment, SegmentTag
from doccompare.errors import AlignmentError


logger = logging.getLogger(__name__)

# Any callable with this shape can stand in for align_lines (e.g. in tests).
Aligner = Callable[[Sequence[str], Sequence[str]], Iterable[Union[Segment, tuple]]]


def align_lines(original: Sequence[str], modified: Sequence[str]) -> list[Segment]:
    """Align two line sequences and return ordered segments.

    A difflib 'replace' opcode is emitted as a deleted segment followed by an
    inserted segment, so every segment carries exactly one tag.
    """
    matcher = difflib.SequenceMatcher(None, original, modified, autojunk=False)
    segments = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            segments.append(Segment(tag=SegmentTag.equal, lines=tuple(original[i1:i2])))
        if tag in ("delete", "replace"):
            segments.append(Segment(tag=SegmentTag.deleted, lines=tuple(original[i1:i2])))
        if tag in ("insert", "replace"):
            segments.append(Segment(tag=SegmentTag.inserted, lines=tuple(modified[j1:j2])))
    return segments


def coerce_segments(raw: Iterable[Union[Segment, tuple]]) -> list[Segment]:
    """Accept Segment objects or (tag, lines) pairs; raises pydantic.ValidationError on bad tags."""
    return [
        s if isinstance(s, Segment) else Segment(tag=s[0], lines=tuple(s[1]))
        for s in raw
    ]


def validate_segments(
    segments: Sequence[Segment],
    original: Sequence[str],
    modified: Sequence[str],
    ) -> None:
    """Raise AlignmentError unless segments reconstruct both line sequences.

    equal + deleted lines (in order) must equal the original; equal + inserted
    lines must equal the modified.
    """
    old_side = [line for s in segments if s.tag != SegmentTag.inserted for line in s.lines]
    new_side = [line for s in segments if s.tag != SegmentTag.deleted for line in s.lines]
    if old_side != list(original):
        raise AlignmentError(
            f"Alignment does not reconstruct the original document "
            f"({len(old_side)} lines aligned, {len(original)} expected)"
        )
    if new_side != list(modified):
        raise AlignmentError(
            f"Alignment does not reconstruct the modified document "
            f"({len(new_side)} lines aligned, {len(modified)} expected)"
        )
