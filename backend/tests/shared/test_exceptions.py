"""Tests for shared/exceptions.py."""

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    NotFoundError,
    SparkError,
    ValidationError,
)


class TestSparkError:
    def test_message_and_default_code(self):
        """Code should default to the class name."""
        error = SparkError("Something broke")
        assert error.message == "Something broke"
        assert error.code == "SparkError"
        assert error.details == {}
        assert str(error) == "Something broke"

    def test_explicit_code_and_details(self):
        error = SparkError("Bad", code="BAD", details={"field": "x"})
        assert error.code == "BAD"
        assert error.details == {"field": "x"}

    def test_to_dict_exposes_only_message(self):
        """API bodies carry just the error message."""
        error = SparkError("Bad", code="BAD", details={"secret": "value"})
        assert error.to_dict() == {"error": "Bad"}


class TestHierarchy:
    def test_subclasses_inherit_from_base(self):
        for cls in (NotFoundError, ValidationError, AuthenticationError, AuthorizationError):
            assert issubclass(cls, SparkError)

    def test_external_service_error_records_service(self):
        error = ExternalServiceError("Timeout", service="supabase")
        assert isinstance(error, SparkError)
        assert error.service == "supabase"
        assert error.details["service"] == "supabase"
        assert error.code == "ExternalServiceError"
