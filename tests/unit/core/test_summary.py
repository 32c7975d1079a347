"""Unit tests for core/summary.py"""

from doccompare.core.models import Added, DiffSummary, Modified, Removed, Unchanged
from doccompare.core.summary import summarize


def test_summarize_empty():
    """Empty input yields an all-zero summary."""
    assert summarize([]) == DiffSummary()
    assert summarize([]).total_changes == 0


def test_summarize_counts_each_kind():
    changes = [
        Unchanged(original_line=1, modified_line=1, text="a"),
        Added(modified_line=2, modified_text="b"),
        Added(modified_line=3, modified_text="c"),
        Removed(original_line=2, original_text="d"),
        Modified(original_line=3, modified_line=4, original_text="e", modified_text="E"),
    ]
    summary = summarize(changes)
    assert (summary.additions, summary.removals, summary.modifications) == (2, 1, 1)
    assert summary.total_changes == 4


def test_summarize_ignores_unchanged():
    changes = [Unchanged(original_line=i, modified_line=i, text="x") for i in range(1, 6)]
    assert summarize(changes).total_changes == 0


def test_summarize_accepts_generator():
    changes = (Added(modified_line=i, modified_text="x") for i in range(1, 4))
    assert summarize(changes).additions == 3
