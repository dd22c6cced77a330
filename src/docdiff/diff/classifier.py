"""
Line classifier for matched line sequences.

Turns the matching produced by the Myers engine into an ordered list of
DiffLine rows covering every left and right line exactly once.

Pairing adjacent unmatched lines as CHANGED is a presentation choice: the
minimal edit script only knows insertions and deletions. Showing a modified
value as one changed row reads better than a deletion followed by an
unrelated insertion, but it is not part of the LCS guarantee.
"""

from typing import List, Sequence, Tuple

from ..core.models import DiffLine, DiffStats, EditScript, LineKind


def classify(
    a: Sequence[str],
    b: Sequence[str],
    matching: EditScript,
) -> Tuple[List[DiffLine], DiffStats]:
    """
    Classify every line of two sequences against their matching.

    Args:
        a: Left lines
        b: Right lines
        matching: Ascending (left_index, right_index) pairs of identical lines

    Returns:
        Tuple of (diff lines with 1-based ordinals, stats)
    """
    lines: List[DiffLine] = []
    stats = DiffStats()

    def emit(kind: LineKind, left: str = "", right: str = "") -> None:
        lines.append(DiffLine(kind=kind, left=left, right=right, ordinal=len(lines) + 1))

    ai = 0
    bi = 0
    mi = 0

    while ai < len(a) or bi < len(b):
        if mi < len(matching) and matching[mi] == (ai, bi):
            emit(LineKind.SAME, a[ai], b[bi])
            ai += 1
            bi += 1
            mi += 1
            continue

        # Unmatched runs end at the next matched pair, or at the end
        if mi < len(matching):
            next_a, next_b = matching[mi]
        else:
            next_a, next_b = len(a), len(b)

        if next_a < ai or next_b < bi or (next_a, next_b) == (ai, bi):
            raise ValueError(f"Matching is not an ascending subsequence at pair {mi}")

        while ai < next_a and bi < next_b:
            emit(LineKind.CHANGED, a[ai], b[bi])
            stats.changed += 1
            ai += 1
            bi += 1

        while ai < next_a:
            emit(LineKind.REMOVED, left=a[ai])
            stats.removed += 1
            ai += 1

        while bi < next_b:
            emit(LineKind.ADDED, right=b[bi])
            stats.added += 1
            bi += 1

    return lines, stats
