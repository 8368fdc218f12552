"""Custom exception classes for CLI error handling.

Each exception class maps to a process exit code.

Exit Codes:
- 0: Success
- 1: General error
- 2: Invalid arguments
- 3: Resource not found
"""


EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_INVALID_ARGS = 2
EXIT_NOT_FOUND = 3


class DialogueSearchError(Exception):
    """Base exception for dialogue search CLI errors.

    Default exit code is EXIT_ERROR (1).
    """
    exit_code = EXIT_ERROR


class InvalidArgumentError(DialogueSearchError):
    """Invalid command line arguments or configuration.

    Examples:
    - Malformed config file
    - Malformed dialogue data file
    - Option values rejected by validation

    Exit code: 2
    """
    exit_code = EXIT_INVALID_ARGS


class ResourceNotFoundError(DialogueSearchError):
    """Resource not found (config file, data file, etc.).

    Exit code: 3
    """
    exit_code = EXIT_NOT_FOUND


class ConfigNotFoundError(ResourceNotFoundError):
    """Specific case: explicitly requested config file is missing."""
    pass


class DataFileNotFoundError(ResourceNotFoundError):
    """Specific case: dialogue data file is missing."""
    pass
