"""
Myers shortest-edit-script line matcher.

Finds a longest common subsequence of two line sequences with the
O((N+M)·D) greedy algorithm from Myers, "An O(ND) Difference Algorithm and
Its Variations" (1986). Inserting one line at the top of a document yields
a single insertion rather than a cascade of changed lines.

The reach vector is snapshotted at every edit distance so the path can be
reconstructed, which costs O(D²) memory. A linear-space divide-and-conquer
variant would give the same matching with less memory.
"""

from typing import List, Sequence
import logging

from ..core.models import EditScript

logger = logging.getLogger(__name__)


def compute_matching(a: Sequence[str], b: Sequence[str]) -> EditScript:
    """
    Compute the matched line pairs of a minimal edit script.

    Args:
        a: Left lines
        b: Right lines

    Returns:
        Ascending (left_index, right_index) pairs of identical lines
    """
    n = len(a)
    m = len(b)
    if n == 0 or m == 0:
        return []

    trace = _shortest_edit(a, b)
    matching = _backtrack(trace, n, m)

    logger.debug(
        f"Matched {len(matching)} lines of {n}x{m} at edit distance {len(trace) - 1}"
    )
    return matching


def _follows_down(v: List[int], offset: int, k: int, d: int) -> bool:
    # Insertion (from diagonal k+1) when on the lower edge or k+1 reaches further
    return k == -d or (k != d and v[offset + k - 1] < v[offset + k + 1])


def _shortest_edit(a: Sequence[str], b: Sequence[str]) -> List[List[int]]:
    """
    Run the forward pass, returning the reach vector as it stood
    before each edit distance d.
    """
    n = len(a)
    m = len(b)
    max_d = n + m
    offset = max_d

    v = [-1] * (2 * max_d + 1)
    v[offset + 1] = 0
    trace: List[List[int]] = []

    for d in range(max_d + 1):
        trace.append(list(v))

        for k in range(-d, d + 1, 2):
            if _follows_down(v, offset, k, d):
                x = v[offset + k + 1]
            else:
                x = v[offset + k - 1] + 1
            y = x - k

            # Matching lines are free diagonal moves
            while x < n and y < m and a[x] == b[y]:
                x += 1
                y += 1

            v[offset + k] = x

            if x >= n and y >= m:
                return trace

    return trace


def _backtrack(trace: List[List[int]], n: int, m: int) -> EditScript:
    """Walk the snapshots back from (n, m), collecting diagonal steps."""
    offset = n + m
    pairs: EditScript = []
    x = n
    y = m

    for d in range(len(trace) - 1, -1, -1):
        v = trace[d]
        k = x - y

        prev_k = k + 1 if _follows_down(v, offset, k, d) else k - 1
        prev_x = v[offset + prev_k]
        prev_y = prev_x - prev_k

        while x > prev_x and y > prev_y:
            x -= 1
            y -= 1
            pairs.append((x, y))

        x = prev_x
        y = prev_y

    pairs.reverse()
    return pairs
