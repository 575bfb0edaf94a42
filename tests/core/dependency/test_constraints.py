"""Tests for Revision parsing and ordering, and Dependency edge acceptance.

Validates that revisions compare componentwise over (major, minor, micro),
that partially written revisions are zero-filled for comparison but keep
their written form for display, and that minimum-revision edges accept
exactly the revisions at or above their bound.
"""

from __future__ import annotations

import pytest

from repodeps.core.dependency import Dependency, Revision
from repodeps.exceptions import RepoDepsError, RevisionError


class TestRevisionParse:
    """Tests for ``Revision.parse``."""

    def test_full_triple(self) -> None:
        """A three-component string parses to the same triple."""
        rev = Revision.parse("23.0.1")
        assert rev.as_tuple() == (23, 0, 1)
        assert str(rev) == "23.0.1"

    def test_major_only_is_zero_filled(self) -> None:
        """A bare major compares as major.0.0 but renders as written."""
        rev = Revision.parse("2")
        assert rev == Revision(2, 0, 0)
        assert str(rev) == "2"

    def test_major_minor(self) -> None:
        rev = Revision.parse("1.1")
        assert rev.as_tuple() == (1, 1, 0)
        assert str(rev) == "1.1"

    def test_integer_input(self) -> None:
        """Unquoted YAML versions arrive as ints."""
        assert Revision.parse(24) == Revision(24)

    def test_surrounding_whitespace_ignored(self) -> None:
        assert Revision.parse("  3.2.1 ") == Revision(3, 2, 1)

    @pytest.mark.parametrize(
        "text", ["", "a.b.c", "1.2.3.4", "-1", "1..2", "01.0.0", "1.2.x"]
    )
    def test_invalid_strings_rejected(self, text: str) -> None:
        """Malformed revisions raise RevisionError."""
        with pytest.raises(RevisionError):
            Revision.parse(text)

    def test_bool_rejected(self) -> None:
        with pytest.raises(RevisionError):
            Revision.parse(True)

    def test_float_rejected(self) -> None:
        """A float has already lost trailing zeros, so 23.10 cannot be recovered."""
        with pytest.raises(RevisionError):
            Revision.parse(23.1)  # type: ignore[arg-type]

    def test_revision_error_is_value_error(self) -> None:
        """RevisionError is catchable both as ValueError and RepoDepsError."""
        with pytest.raises(ValueError):
            Revision.parse("nope")
        with pytest.raises(RepoDepsError):
            Revision.parse("nope")

    def test_negative_component_rejected(self) -> None:
        with pytest.raises(RevisionError):
            Revision(1, -1, 0)


class TestRevisionOrdering:
    """Tests for the componentwise total order."""

    def test_major_dominates(self) -> None:
        assert Revision(2, 0, 0) > Revision(1, 9, 9)

    def test_minor_then_micro(self) -> None:
        assert Revision(1, 2, 0) > Revision(1, 1, 9)
        assert Revision(1, 1, 2) > Revision(1, 1, 1)

    def test_precision_does_not_affect_equality(self) -> None:
        """Revisions 2 and 2.0.0 are equal and hash alike."""
        assert Revision.parse("2") == Revision.parse("2.0.0")
        assert hash(Revision.parse("2")) == hash(Revision.parse("2.0.0"))

    def test_sorting(self) -> None:
        revs = [Revision.parse(s) for s in ["1.10", "1.2", "1.2.1", "0.9"]]
        assert [str(r) for r in sorted(revs)] == ["0.9", "1.2", "1.2.1", "1.10"]


class TestDependency:
    """Tests for ``Dependency.accepts`` and rendering."""

    def test_no_minimum_accepts_anything(self) -> None:
        dep = Dependency("tools")
        assert dep.accepts(Revision(0, 0, 0))
        assert dep.accepts(Revision(99, 0, 0))

    def test_minimum_is_inclusive(self) -> None:
        dep = Dependency("tools", Revision.parse("1.1.1"))
        assert dep.accepts(Revision(1, 1, 1))
        assert dep.accepts(Revision(2, 0, 0))
        assert not dep.accepts(Revision(1, 1, 0))

    def test_partial_minimum_acts_as_wildcard(self) -> None:
        """A minimum of 2 admits every 2.x.y."""
        dep = Dependency("tools", Revision.parse("2"))
        assert dep.accepts(Revision(2, 0, 0))
        assert dep.accepts(Revision(2, 5, 3))
        assert not dep.accepts(Revision(1, 99, 99))

    def test_str(self) -> None:
        assert str(Dependency("tools")) == "tools"
        assert str(Dependency("tools", Revision.parse("2"))) == "tools>=2"

    def test_edges_are_hashable_and_compare_by_value(self) -> None:
        a = Dependency("x", Revision(1))
        b = Dependency("x", Revision(1))
        assert a == b
        assert len({a, b}) == 1
