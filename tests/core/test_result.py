"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings factory and has_warning()
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from datastats.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestConstruction:

    def test_fields_accessible(self):
        r = Result(params=FakeParams(1.5), info={'n': 3}, timing=None)
        assert r.params.value == 1.5
        assert r.info == {'n': 3}
        assert r.timing is None

    def test_default_warnings_empty(self):
        r = Result(params=FakeParams(0.0), info={}, timing=None)
        assert r.warnings == ()

    def test_timing_dict(self):
        r = Result(params=FakeParams(0.0), info={}, timing={'total_seconds': 0.1})
        assert r.timing['total_seconds'] == 0.1


class TestImmutability:

    def test_cannot_reassign_params(self):
        r = Result(params=FakeParams(0.0), info={}, timing=None)
        with pytest.raises(FrozenInstanceError):
            r.params = FakeParams(1.0)

    def test_cannot_reassign_warnings(self):
        r = Result(params=FakeParams(0.0), info={}, timing=None)
        with pytest.raises(FrozenInstanceError):
            r.warnings = ("late",)


class TestHasWarning:

    def test_substring_match(self):
        r = Result(
            params=FakeParams(0.0), info={}, timing=None,
            warnings=("kurtosis: requires at least 4 samples, got 3",),
        )
        assert r.has_warning("kurtosis")
        assert r.has_warning("at least 4")

    def test_no_match(self):
        r = Result(params=FakeParams(0.0), info={}, timing=None, warnings=("a",))
        assert not r.has_warning("skewness")

    def test_empty_warnings(self):
        r = Result(params=FakeParams(0.0), info={}, timing=None)
        assert not r.has_warning("")
