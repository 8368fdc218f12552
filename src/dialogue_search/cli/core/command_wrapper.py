"""Command wrapper utilities for consistent error handling.

Standardizes for CLI command functions:
- Error handling with proper exit codes
- Custom exception handling (InvalidArgumentError, ResourceNotFoundError)

Example:
    def search_command(question: str, output_json: bool):
        with command_context("Search failed", output_json):
            ...
"""

import logging
import sys
from contextlib import contextmanager

from ..errors import InvalidArgumentError, ResourceNotFoundError
from ..output import print_error

logger = logging.getLogger(__name__)


@contextmanager
def command_context(error_prefix: str = "Failed", output_json: bool = False):
    """Context manager for CLI command error handling.

    Args:
        error_prefix: Prefix for error messages (default: "Failed")
        output_json: Whether JSON output mode is enabled

    Yields:
        None

    Raises:
        InvalidArgumentError: Re-raised for CLI to handle
        ResourceNotFoundError: Re-raised for CLI to handle
        SystemExit: On unhandled exceptions (exits with code 1)
    """
    try:
        yield

    except (InvalidArgumentError, ResourceNotFoundError):
        raise  # Re-raise for CLI main() to handle

    except Exception as e:
        logger.debug("Unhandled command error", exc_info=True)
        print_error(f"{error_prefix}: {e}", output_json)
        sys.exit(1)
