"""
Unit tests for base use case patterns.
"""

import pytest

from app.application.use_cases.base_use_case import BaseUseCase, UseCaseResult
from app.domain.models.base import DomainException, ValidationError


class TestUseCaseResult:
    """Test cases for UseCaseResult."""

    def test_success_result(self):
        """Test creating successful result."""
        result = UseCaseResult.success_result({"id": 1, "name": "test"})

        assert result.success is True
        assert result.data == {"id": 1, "name": "test"}
        assert result.error is None
        assert result.error_code is None

    def test_error_result(self):
        """Test creating error result."""
        result = UseCaseResult.error_result("Something went wrong", "TEST_ERROR")

        assert result.success is False
        assert result.data is None
        assert result.error == "Something went wrong"
        assert result.error_code == "TEST_ERROR"

    def test_from_validation_error(self):
        """Test mapping a validation error."""
        result = UseCaseResult.from_exception(ValidationError("Title is required", "title"))

        assert result.success is False
        assert result.error == "Title is required"
        assert result.error_code == "VALIDATION_ERROR"

    def test_from_domain_exception(self):
        """Test mapping a domain exception keeps its code."""
        result = UseCaseResult.from_exception(DomainException("SMTP send failed", "EMAIL_DELIVERY_FAILED"))

        assert result.error == "SMTP send failed"
        assert result.error_code == "EMAIL_DELIVERY_FAILED"

    def test_from_unknown_exception(self):
        """Test mapping an arbitrary exception."""
        result = UseCaseResult.from_exception(RuntimeError("boom"))

        assert result.error == "boom"
        assert result.error_code == "UNKNOWN_ERROR"


class EchoUseCase(BaseUseCase[str, str]):
    """Upper-cases its request, fails on 'fail'."""

    async def _execute_business_logic(self, request: str) -> str:
        if request == "fail":
            raise ValidationError("Request rejected")
        return request.upper()


class TestBaseUseCase:
    """Test cases for BaseUseCase.execute."""

    @pytest.mark.asyncio
    async def test_execute_success(self):
        """Test successful execution carries timing metadata."""
        result = await EchoUseCase().execute("hello")

        assert result.success is True
        assert result.data == "HELLO"
        assert result.metadata["execution_time_seconds"] >= 0
        assert "executed_at" in result.metadata

    @pytest.mark.asyncio
    async def test_execute_failure(self):
        """Test exceptions are converted into error results."""
        result = await EchoUseCase().execute("fail")

        assert result.success is False
        assert result.error == "Request rejected"
        assert result.error_code == "VALIDATION_ERROR"
        assert result.metadata["exception_type"] == "ValidationError"
