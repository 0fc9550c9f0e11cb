"""
Error types and error handling helpers for OmniCLI.

Input-driven failures (bad prefix, unknown command, failing provider) are
recoverable: the engine turns them into error values or empty suggestion
lists. Malformed command declarations are programmer errors and raise.
"""

import functools
import asyncio
import inspect
import logging
from typing import Any, Callable, Optional, Type, Dict
from ..utils.logging import get_logger


class OmniCLIError(Exception):
    """Base exception for all OmniCLI errors."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PrefixMismatchError(OmniCLIError):
    """Input does not start with the configured command prefix."""
    pass


class NoCommandMatchedError(OmniCLIError):
    """No registered command (and no default command) matched the input."""
    pass


class ProviderRejectedError(OmniCLIError):
    """A command's suggestion provider failed."""
    pass


class MalformedMotionTokenError(OmniCLIError):
    """A motion segment held a token that could not be resolved."""
    pass


class CommandActionError(OmniCLIError):
    """A command's action raised while handling submitted input."""
    pass


class ConfigurationError(OmniCLIError):
    """Configuration-related error."""
    pass


class ValidationError(OmniCLIError):
    """Input validation error."""
    pass


def handle_provider_operation(operation_name: str, logger: Optional[logging.Logger] = None):
    """
    Decorator to standardize suggestion provider error handling.

    Any failure is logged and re-raised as ``ProviderRejectedError`` with the
    original exception chained.

    Args:
        operation_name: Human-readable name of the operation
        logger: Optional logger instance (defaults to operation-specific logger)
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs) -> Any:
            _logger = logger or get_logger(f"omnicli.providers.{operation_name}")

            try:
                _logger.debug(f"Starting {operation_name}")
                result = await func(*args, **kwargs)
                _logger.debug(f"{operation_name} completed successfully")
                return result

            except ProviderRejectedError:
                raise

            except asyncio.CancelledError:
                raise

            except Exception as e:
                _logger.error(f"{operation_name} failed: {e}", exc_info=True)
                raise ProviderRejectedError(
                    f"{operation_name} failed: {e}",
                    details={"error_type": type(e).__name__, "original_error": str(e)}
                ) from e

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs) -> Any:
            _logger = logger or get_logger(f"omnicli.providers.{operation_name}")

            try:
                _logger.debug(f"Starting {operation_name}")
                result = func(*args, **kwargs)
                _logger.debug(f"{operation_name} completed successfully")
                return result

            except ProviderRejectedError:
                raise

            except Exception as e:
                _logger.error(f"{operation_name} failed: {e}", exc_info=True)
                raise ProviderRejectedError(
                    f"{operation_name} failed: {e}",
                    details={"error_type": type(e).__name__, "original_error": str(e)}
                ) from e

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        else:
            return sync_wrapper

    return decorator


def handle_command_action(operation_name: str, logger: Optional[logging.Logger] = None):
    """
    Decorator to standardize command action error handling.

    Args:
        operation_name: Human-readable name of the operation
        logger: Optional logger instance
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            _logger = logger or get_logger(f"omnicli.actions.{operation_name}")

            try:
                _logger.debug(f"Running {operation_name}")
                return func(*args, **kwargs)

            except OmniCLIError:
                raise

            except Exception as e:
                _logger.error(f"{operation_name} failed: {e}", exc_info=True)
                raise CommandActionError(
                    f"{operation_name} failed: {e}",
                    details={"error_type": type(e).__name__, "original_error": str(e)}
                ) from e

        return wrapper

    return decorator


def validate_input(
    data: Any,
    field_name: str,
    expected_type: Type = None,
    required: bool = True,
    validator: Optional[Callable] = None
) -> Any:
    """
    Standardized input validation utility.

    Args:
        data: The data to validate
        field_name: Name of the field being validated
        expected_type: Expected type of the data
        required: Whether the field is required
        validator: Optional custom validator function

    Returns:
        The validated data

    Raises:
        ValidationError: If validation fails
    """
    if required and data is None:
        raise ValidationError(f"{field_name} is required")

    if data is not None and expected_type and not isinstance(data, expected_type):
        raise ValidationError(
            f"{field_name} must be of type {expected_type.__name__}, got {type(data).__name__}"
        )

    if validator:
        try:
            return validator(data)
        except ValidationError:
            raise
        except Exception as e:
            raise ValidationError(f"{field_name} validation failed: {e}") from e

    return data
