"""
Test suite for error handling utilities.

This module tests the provider and action decorators and the input
validation helper.
"""

import asyncio
import pytest
from unittest.mock import Mock

from omnicli.utils.error_handling import (
    CommandActionError,
    NoCommandMatchedError,
    OmniCLIError,
    ProviderRejectedError,
    ValidationError,
    handle_command_action,
    handle_provider_operation,
    validate_input,
)


class TestHandleProviderOperation:
    """Test the handle_provider_operation decorator."""

    @pytest.mark.asyncio
    async def test_successful_async_call(self):
        """Results pass through and the call is logged at debug level."""
        mock_logger = Mock()

        @handle_provider_operation("lookup", mock_logger)
        async def lookup(value):
            await asyncio.sleep(0)
            return [value]

        assert await lookup("x") == ["x"]
        mock_logger.debug.assert_called_with("lookup completed successfully")

    @pytest.mark.asyncio
    async def test_async_exception_is_wrapped(self):
        """Failures are re-raised as ProviderRejectedError."""
        mock_logger = Mock()

        @handle_provider_operation("lookup", mock_logger)
        async def lookup():
            raise ConnectionError("offline")

        with pytest.raises(ProviderRejectedError) as exc_info:
            await lookup()

        assert "lookup failed: offline" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ConnectionError)
        assert exc_info.value.details["error_type"] == "ConnectionError"

        error_call = mock_logger.error.call_args
        assert error_call[1]["exc_info"] is True

    @pytest.mark.asyncio
    async def test_rejection_is_not_rewrapped(self):
        """An existing ProviderRejectedError propagates unchanged."""
        original = ProviderRejectedError("already rejected")

        @handle_provider_operation("lookup", Mock())
        async def lookup():
            raise original

        with pytest.raises(ProviderRejectedError) as exc_info:
            await lookup()

        assert exc_info.value is original

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self):
        """Cancellation is not turned into a rejection."""
        @handle_provider_operation("lookup", Mock())
        async def lookup():
            raise asyncio.CancelledError()

        with pytest.raises(asyncio.CancelledError):
            await lookup()

    def test_sync_exception_is_wrapped(self):
        """Synchronous functions get the same treatment."""
        @handle_provider_operation("lookup", Mock())
        def lookup():
            raise KeyError("missing")

        with pytest.raises(ProviderRejectedError):
            lookup()

    def test_preserves_metadata(self):
        @handle_provider_operation("lookup")
        def lookup():
            """Look things up."""

        assert lookup.__name__ == "lookup"
        assert lookup.__doc__ == "Look things up."


class TestHandleCommandAction:
    """Test the handle_command_action decorator."""

    def test_successful_call(self):
        action = handle_command_action("greet", Mock())(lambda args: "ok")

        assert action(["a"]) == "ok"

    def test_exception_is_wrapped(self):
        def action(args):
            raise ValueError("bad")

        with pytest.raises(CommandActionError) as exc_info:
            handle_command_action("greet", Mock())(action)([])

        assert "greet failed: bad" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_library_errors_pass_through(self):
        def action(args):
            raise NoCommandMatchedError("nested")

        with pytest.raises(NoCommandMatchedError):
            handle_command_action("greet", Mock())(action)([])


class TestValidateInput:
    """Test the validate_input helper."""

    def test_required(self):
        with pytest.raises(ValidationError, match="name is required"):
            validate_input(None, "name")

    def test_optional_none(self):
        assert validate_input(None, "name", str, required=False) is None

    def test_type_mismatch(self):
        with pytest.raises(ValidationError, match="must be of type str"):
            validate_input(3, "name", str)

    def test_validator_result_is_returned(self):
        assert validate_input("a", "name", str, validator=str.upper) == "A"

    def test_validator_failure_is_wrapped(self):
        def reject(value):
            raise ValueError("nope")

        with pytest.raises(ValidationError, match="name validation failed"):
            validate_input("a", "name", str, validator=reject)


class TestExceptions:

    def test_details_default_to_empty(self):
        error = OmniCLIError("message")

        assert error.message == "message"
        assert error.details == {}

    def test_hierarchy(self):
        assert issubclass(ProviderRejectedError, OmniCLIError)
        assert issubclass(ValidationError, OmniCLIError)
