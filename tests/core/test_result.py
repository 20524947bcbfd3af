"""
Tests for the Result[P] envelope.

Validates:
    - Generic payloads
    - Frozen immutability
    - Default factories (warnings, provenance)
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pylinstat.core.result import Result, _default_provenance


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**kwargs):
    defaults = dict(params=FakeParams(value=1.0), info={}, timing=None, backend_name="cpu")
    defaults.update(kwargs)
    return Result(**defaults)


class TestResultConstruction:

    def test_basic_creation(self):
        result = _result(
            params=FakeParams(value=42.0),
            info={"method": "householder_qr"},
            timing={"total_seconds": 0.01},
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "householder_qr"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu"

    def test_timing_none(self):
        assert _result().timing is None


class TestDefaults:

    def test_warnings_default_empty(self):
        result = _result()
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_provenance_auto_generated(self):
        result = _result()
        assert "pylinstat_version" in result.provenance
        assert "numpy_version" in result.provenance
        assert "scipy_version" in result.provenance

    def test_provenance_explicit_override(self):
        result = _result(provenance={"custom": "metadata"})
        assert result.provenance == {"custom": "metadata"}

    def test_default_provenance_independent_copies(self):
        prov1 = _default_provenance()
        prov2 = _default_provenance()
        assert prov1 is not prov2
        assert prov1 == prov2


class TestImmutability:
    """Result is frozen: no attribute mutation allowed."""

    def test_cannot_set_params(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_set_warnings(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("new warning",)


class TestHasWarning:

    def test_no_warnings_returns_false(self):
        assert _result().has_warning("anything") is False

    def test_substring_match(self):
        result = _result(warnings=("A is rank-deficient (rank=2, expected=3)",))
        assert result.has_warning("rank-deficient") is True
        assert result.has_warning("expected=3") is True
        assert result.has_warning("singular") is False
