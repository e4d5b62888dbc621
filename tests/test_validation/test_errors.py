"""Tests for the violation accumulator and error types."""

import pickle

import pytest

from hostos.validation.errors import HostOSConfigError, HostOSError, Violations, format_list


class TestViolations:
    """Test Violations accumulator."""

    def test_empty(self):
        """Test a fresh accumulator has nothing to report."""
        violations = Violations()

        assert not violations
        assert len(violations) == 0
        assert str(violations) == ""
        violations.raise_if_any()

    def test_keeps_order_and_skips_none(self):
        """Test messages keep insertion order and None is ignored."""
        violations = Violations()
        violations.add("first")
        violations.add(None)
        violations.extend(["second", "third"])

        assert list(violations) == ["first", "second", "third"]
        assert str(violations) == "first; second; third"
        assert not violations.fatal

    def test_fatal(self):
        """Test fatal violations are flagged."""
        violations = Violations()
        violations.add_fatal("stop here")

        assert violations.fatal
        assert violations.messages == ["stop here"]

    def test_raise_if_any(self):
        """Test collected messages become one error."""
        violations = Violations()
        violations.add("a")
        violations.add("b")

        with pytest.raises(HostOSConfigError) as exc_info:
            violations.raise_if_any()

        assert exc_info.value.violations == ["a", "b"]
        assert str(exc_info.value) == "a; b"
        assert isinstance(exc_info.value, HostOSError)

    def test_messages_is_a_copy(self):
        """Test callers cannot change the collected messages."""
        violations = Violations()
        violations.add("a")
        violations.messages.append("b")

        assert len(violations) == 1


def test_format_list():
    """Test list rendering used in messages."""
    assert format_list(["a", "b", "c"]) == "[a, b, c]"
    assert format_list(["only"]) == "[only]"


def test_config_error_survives_pickling():
    """Test violations are kept intact across pickling."""
    error = HostOSConfigError(["first", "second"])

    restored = pickle.loads(pickle.dumps(error))

    assert restored.violations == ["first", "second"]
    assert str(restored) == "first; second"
