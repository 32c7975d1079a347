"""Unit tests for core/align.py"""

import pytest
from pydantic import ValidationError

from doccompare.core.align import align_lines, coerce_segments, validate_segments
from doccompare.core.models import Segment, SegmentTag
from doccompare.errors import AlignmentError


def _tags(segments):
    return [(s.tag.value, list(s.lines)) for s in segments]


def test_align_identical_is_single_equal_segment():
    assert _tags(align_lines(["a", "b"], ["a", "b"])) == [("equal", ["a", "b"])]


def test_align_empty_inputs_produce_no_segments():
    assert align_lines([], []) == []


def test_align_insert():
    """An inserted line splits the common lines into two equal segments."""
    assert _tags(align_lines(["a", "b"], ["a", "x", "b"])) == [
        ("equal", ["a"]),
        ("inserted", ["x"]),
        ("equal", ["b"]),
    ]


def test_align_replace_becomes_deleted_then_inserted():
    """A difflib 'replace' opcode is split into deleted followed by inserted."""
    assert _tags(align_lines(["foo", "bar"], ["foo", "baz"])) == [
        ("equal", ["foo"]),
        ("deleted", ["bar"]),
        ("inserted", ["baz"]),
    ]


def test_align_does_not_junk_repeated_lines():
    """Frequently repeated lines (e.g. blanks in long documents) still align as equal."""
    original = ["", "x"] * 150
    modified = ["", "x"] * 150 + ["tail"]
    segments = align_lines(original, modified)
    assert _tags(segments) == [("equal", original), ("inserted", ["tail"])]


def test_align_output_satisfies_contract(contract_texts):
    original, modified = (t.split("\n") if t else [] for t in contract_texts)
    validate_segments(align_lines(original, modified), original, modified)


def test_coerce_segments_accepts_tuples():
    segments = coerce_segments([("equal", ["a"]), Segment(tag=SegmentTag.deleted, lines=("b",))])
    assert _tags(segments) == [("equal", ["a"]), ("deleted", ["b"])]


def test_coerce_segments_rejects_unknown_tag():
    with pytest.raises(ValidationError):
        coerce_segments([("replace", ["a"])])


def test_validate_segments_rejects_missing_original_line():
    segments = [Segment(tag=SegmentTag.equal, lines=("a",))]
    with pytest.raises(AlignmentError, match="original"):
        validate_segments(segments, ["a", "b"], ["a"])


def test_validate_segments_rejects_reordered_modified_lines():
    segments = [
        Segment(tag=SegmentTag.inserted, lines=("y",)),
        Segment(tag=SegmentTag.inserted, lines=("x",)),
    ]
    with pytest.raises(AlignmentError, match="modified"):
        validate_segments(segments, [], ["x", "y"])


def test_validate_segments_accepts_non_minimal_alignment():
    """Any reconstructing alignment is valid, even one with no equal segments."""
    segments = [
        Segment(tag=SegmentTag.deleted, lines=("a", "b")),
        Segment(tag=SegmentTag.inserted, lines=("a", "b")),
    ]
    validate_segments(segments, ["a", "b"], ["a", "b"])
