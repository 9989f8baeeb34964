"""Unit tests for error handling."""
import pytest
from pydantic import ValidationError
from pagewindow.utils.errors import (
    InvalidConfiguration,
    describe_validation_error,
    handle_error,
)
from pagewindow.validation import PaginationConfig


class TestInvalidConfiguration:
    def test_reasons_joined(self):
        e = InvalidConfiguration(["limit: too small", "total: too small"])
        assert str(e) == "limit: too small; total: too small"
        assert e.reasons == ["limit: too small", "total: too small"]

    def test_no_reasons(self):
        assert str(InvalidConfiguration([])) == "invalid configuration"


class TestErrorHandling:
    def test_invalid_configuration(self):
        result = handle_error(InvalidConfiguration(["limit: must be >= 1"]))
        assert result.startswith("Error: Invalid pagination configuration")
        assert "limit: must be >= 1" in result
        assert "limit must be >= 1" in result

    def test_validation_error_flattened_into_reasons(self):
        with pytest.raises(ValidationError) as exc:
            PaginationConfig(offset=-1, limit=10, total=50)
        reasons = describe_validation_error(exc.value)
        assert len(reasons) == 1
        assert reasons[0].startswith("offset: ")

    def test_generic_error(self):
        result = handle_error(ValueError("test error"))
        assert "ValueError" in result
        assert "test error" in result
