"""Rewrite adjacent removed/added lines as modifications.

Two pairing policies are available:

``block`` (default)
    A maximal run of R removed lines immediately followed by a run of A added
    lines yields min(R, A) modified records, paired by position (1st removed
    with 1st added, ...). Leftover removed lines, then leftover added lines,
    follow the pairs.

``window``
    A removed line is paired with the first added line found within
    ``window`` records ahead, looking past other removed lines only. The
    removed lines looked past are kept, emitted right after the pair. Any
    other record ends the search.

Both are linear scans over the expanded change list. They must run once per
comparison; feeding already-paired output back in is not supported.
"""

from typing import Sequence

from doccompare.core.models import Added, Change, ChangeType, Modified, Removed


POLICIES = ("block", "window")
DEFAULT_WINDOW = 5


def _run_end(changes: Sequence[Change], start: int, kind: ChangeType) -> int:
    """Return the index one past the run of `kind` records beginning at start."""
    end = start
    while end < len(changes) and changes[end].kind == kind:
        end += 1
    return end


def _pair(removed: Removed, added: Added) -> Modified:
    return Modified(
        original_line=removed.original_line,
        modified_line=added.modified_line,
        original_text=removed.original_text,
        modified_text=added.modified_text,
    )


def pair_blocks(changes: Sequence[Change]) -> list[Change]:
    """Positionally pair each removed run with the added run directly after it."""
    result: list[Change] = []
    i = 0
    while i < len(changes):
        if changes[i].kind != ChangeType.removed:
            result.append(changes[i])
            i += 1
            continue

        removed_end = _run_end(changes, i, ChangeType.removed)
        added_end = _run_end(changes, removed_end, ChangeType.added)
        removed = changes[i:removed_end]
        added = changes[removed_end:added_end]
        paired = min(len(removed), len(added))

        result.extend(_pair(r, a) for r, a in zip(removed, added))
        result.extend(removed[paired:])
        result.extend(added[paired:])
        i = added_end

    return result


def pair_window(changes: Sequence[Change], window: int = DEFAULT_WINDOW) -> list[Change]:
    """Pair each removed line with the nearest added line within `window` records ahead."""
    result: list[Change] = []
    i = 0
    while i < len(changes):
        change = changes[i]
        if change.kind == ChangeType.removed:
            j = i + 1
            while j < len(changes) and j - i <= window and changes[j].kind == ChangeType.removed:
                j += 1
            if j < len(changes) and j - i <= window and changes[j].kind == ChangeType.added:
                result.append(_pair(change, changes[j]))
                result.extend(changes[i + 1:j])
                i = j + 1
                continue
        result.append(change)
        i += 1
    return result


def check_policy(policy: str, window: int = DEFAULT_WINDOW) -> None:
    """Raise ValueError for an unknown policy or a window policy with window < 1."""
    if policy not in POLICIES:
        raise ValueError(f"Unknown pairing policy '{policy}'; expected one of {', '.join(POLICIES)}")
    if policy == "window" and window < 1:
        raise ValueError(f"Pairing window must be >= 1, got {window}")


def synthesize_modifications(
    changes: Sequence[Change],
    policy: str = "block",
    window: int = DEFAULT_WINDOW,
    ) -> list[Change]:
    """Apply the named pairing policy to an expanded change list."""
    check_policy(policy, window)
    if policy == "window":
        return pair_window(changes, window)
    return pair_blocks(changes)
