"""Tally final change kinds into a DiffSummary"""

from typing import Iterable

from doccompare.core.models import Change, ChangeType, DiffSummary


def summarize(changes: Iterable[Change]) -> DiffSummary:
    """Count added/removed/modified records; unchanged lines are ignored."""
    additions = removals = modifications = 0
    for change in changes:
        if change.kind == ChangeType.added:
            additions += 1
        elif change.kind == ChangeType.removed:
            removals += 1
        elif change.kind == ChangeType.modified:
            modifications += 1
    return DiffSummary(additions=additions, removals=removals, modifications=modifications)
