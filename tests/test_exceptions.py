"""Tests for public exceptions."""

import pytest

from linode_sdk.exceptions import (
    LinodeAPIError,
    LinodeConfigError,
    LinodeError,
    LinodeResponseError,
    LinodeValidationError,
)


class TestLinodeError:
    """Tests for base LinodeError."""

    def test_is_exception(self):
        """LinodeError should be an Exception."""
        assert issubclass(LinodeError, Exception)

    @pytest.mark.parametrize(
        "error_cls",
        [LinodeAPIError, LinodeConfigError, LinodeResponseError, LinodeValidationError],
    )
    def test_subclasses(self, error_cls):
        """Every SDK error should be catchable as LinodeError."""
        assert issubclass(error_cls, LinodeError)


class TestLinodeAPIError:
    """Tests for LinodeAPIError."""

    def test_with_message_only(self):
        """Should create error with message only."""
        error = LinodeAPIError("API request failed")
        assert str(error) == "API request failed"
        assert error.errors == []
        assert error.action is None
        assert error.status_code is None

    def test_from_string_errors(self):
        """Should list plain error descriptors in the message."""
        error = LinodeAPIError.from_errors(["failure", "other"], action="test.echo")
        assert str(error) == "test.echo failed: failure; other"
        assert error.errors == ["failure", "other"]
        assert error.action == "test.echo"

    def test_from_descriptor_errors(self):
        """Should render ERRORCODE and ERRORMESSAGE descriptors."""
        error = LinodeAPIError.from_errors(
            [{"ERRORCODE": 5, "ERRORMESSAGE": "Object not found"}],
            action="avail.kernels",
            status_code=200,
        )
        assert str(error) == "avail.kernels failed: 5: Object not found"
        assert error.status_code == 200

    def test_without_action(self):
        """Should use a generic prefix when no action is known."""
        error = LinodeAPIError.from_errors([{"ERRORMESSAGE": "nope"}])
        assert str(error) == "API request failed: nope"

    def test_copies_errors(self):
        """Should not share the caller's error list."""
        errors = ["failure"]
        error = LinodeAPIError("failed", errors=errors)
        errors.append("later")
        assert error.errors == ["failure"]

    def test_can_be_caught_as_linode_error(self):
        """Should be catchable as LinodeError."""
        with pytest.raises(LinodeError):
            raise LinodeAPIError.from_errors(["failure"])


class TestLinodeConfigError:
    """Tests for LinodeConfigError."""

    def test_can_be_raised(self):
        """Should be raisable with message."""
        with pytest.raises(LinodeConfigError) as exc_info:
            raise LinodeConfigError("An API key is required")
        assert str(exc_info.value) == "An API key is required"
