"""
Tests for the Myers line matcher and the line classifier.
"""

import random

import pytest

from docdiff.core.models import LineKind
from docdiff.diff.classifier import classify
from docdiff.diff.myers import compute_matching


def lcs_length(a, b):
    """Reference LCS length by dynamic programming."""
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) - 1, -1, -1):
        for j in range(len(b) - 1, -1, -1):
            if a[i] == b[j]:
                table[i][j] = table[i + 1][j + 1] + 1
            else:
                table[i][j] = max(table[i + 1][j], table[i][j + 1])
    return table[0][0]


class TestMyersMatching:
    """Tests for compute_matching."""

    def test_lcs_correctness(self):
        """Test the classic A B C D / A X B D case."""
        a = ["A", "B", "C", "D"]
        b = ["A", "X", "B", "D"]

        matching = compute_matching(a, b)

        assert matching == [(0, 0), (1, 2), (3, 3)]
        assert [a[i] for i, _ in matching] == ["A", "B", "D"]

    def test_empty_sides(self):
        """Test that an empty side has no matches."""
        assert compute_matching([], ["a"]) == []
        assert compute_matching(["a"], []) == []
        assert compute_matching([], []) == []

    def test_identical(self):
        """Test that identical sequences match fully."""
        lines = ["x", "y", "z"]
        assert compute_matching(lines, list(lines)) == [(0, 0), (1, 1), (2, 2)]

    def test_insert_at_top(self):
        """Test that a leading insertion keeps the rest matched."""
        matching = compute_matching(["l1", "l2", "l3"], ["new", "l1", "l2", "l3"])
        assert matching == [(0, 1), (1, 2), (2, 3)]

    def test_disjoint(self):
        """Test that sequences with nothing in common have no matches."""
        assert compute_matching(["a", "b"], ["c", "d", "e"]) == []

    def test_repeated_lines(self):
        """Test matching when lines repeat."""
        a = ["}", "}", "x", "}"]
        b = ["}", "x", "}", "}"]
        matching = compute_matching(a, b)
        assert len(matching) == lcs_length(a, b) == 3

    @pytest.mark.parametrize("seed", range(12))
    def test_matches_reference_lcs(self, seed):
        """Test minimality and validity against the DP reference."""
        rng = random.Random(seed)
        a = [rng.choice("abcd") for _ in range(rng.randint(1, 25))]
        b = [rng.choice("abcd") for _ in range(rng.randint(1, 25))]

        matching = compute_matching(a, b)

        assert len(matching) == lcs_length(a, b)
        for i, j in matching:
            assert a[i] == b[j]
        for (i1, j1), (i2, j2) in zip(matching, matching[1:]):
            assert i1 < i2 and j1 < j2


class TestClassifier:
    """Tests for classify."""

    def test_single_insertion(self):
        """Test that one inserted line is one added row."""
        a = "line1\nline2\nline3".split("\n")
        b = "inserted\nline1\nline2\nline3".split("\n")

        lines, stats = classify(a, b, compute_matching(a, b))

        added = [line for line in lines if line.kind == LineKind.ADDED]
        same = [line for line in lines if line.kind == LineKind.SAME]
        assert len(added) == 1
        assert added[0].right == "inserted"
        assert added[0].left == ""
        assert len(same) == 3
        assert stats.to_dict() == {"added": 1, "removed": 0, "changed": 0}

    def test_changed_pairing(self):
        """Test that adjacent unmatched lines pair up as changed."""
        a = ["x", "1", "y"]
        b = ["x", "2", "y"]

        lines, stats = classify(a, b, compute_matching(a, b))

        assert [line.kind for line in lines] == [LineKind.SAME, LineKind.CHANGED, LineKind.SAME]
        assert (lines[1].left, lines[1].right) == ("1", "2")
        assert stats.changed == 1
        assert stats.added == stats.removed == 0

    def test_uneven_runs(self):
        """Test that leftover lines after pairing become removed rows."""
        a = ["x", "1", "2", "y"]
        b = ["x", "3", "y"]

        lines, stats = classify(a, b, compute_matching(a, b))

        assert [line.kind for line in lines] == [
            LineKind.SAME,
            LineKind.CHANGED,
            LineKind.REMOVED,
            LineKind.SAME,
        ]
        assert lines[2].left == "2"
        assert lines[2].right == ""
        assert stats.to_dict() == {"added": 0, "removed": 1, "changed": 1}

    def test_trailing_additions(self):
        """Test lines added after the last match."""
        lines, stats = classify(["x"], ["x", "y", "z"], [(0, 0)])

        assert [line.kind for line in lines] == [LineKind.SAME, LineKind.ADDED, LineKind.ADDED]
        assert stats.added == 2

    def test_no_matching(self):
        """Test classification with an empty matching."""
        lines, stats = classify(["a", "b"], ["c"], [])

        assert [line.kind for line in lines] == [LineKind.CHANGED, LineKind.REMOVED]
        assert stats.to_dict() == {"added": 0, "removed": 1, "changed": 1}

    def test_ordinals(self):
        """Test that ordinals count output rows from 1."""
        a = ["a", "b", "c"]
        b = ["z", "a", "c", "d"]
        lines, _ = classify(a, b, compute_matching(a, b))

        assert [line.ordinal for line in lines] == list(range(1, len(lines) + 1))

    def test_coverage(self):
        """Test that every line of each side appears exactly once."""
        rng = random.Random(7)
        a = [rng.choice("pqrs") for _ in range(30)]
        b = [rng.choice("pqrs") for _ in range(22)]

        lines, stats = classify(a, b, compute_matching(a, b))

        left = [l.left for l in lines if l.kind in (LineKind.SAME, LineKind.REMOVED, LineKind.CHANGED)]
        right = [l.right for l in lines if l.kind in (LineKind.SAME, LineKind.ADDED, LineKind.CHANGED)]
        same = sum(1 for l in lines if l.kind == LineKind.SAME)
        assert left == a
        assert right == b
        assert same + stats.removed + stats.changed == len(a)
        assert same + stats.added + stats.changed == len(b)
        assert stats.total + same == len(lines)

    def test_rejects_unordered_matching(self):
        """Test that a non-ascending matching is refused."""
        with pytest.raises(ValueError):
            classify(["a", "b", "c"], ["a", "b", "c"], [(1, 1), (0, 0)])
