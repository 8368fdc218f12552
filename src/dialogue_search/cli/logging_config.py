"""Centralized logging configuration for CLI commands.

Provides three logging levels:
- Default: Clean output, only warnings and errors
- Verbose: Show search progress (lookups, result counts)
- Debug: Show everything including redirect resolution and store lookups
"""

import logging


def setup_logging_default():
    """Default logging: Clean output, only warnings and errors.

    Shows:
    - User-facing error messages
    - Malformed data warnings
    """
    logging.basicConfig(
        level=logging.WARNING,
        format='%(levelname)s: %(message)s'
    )
    logging.getLogger('dialogue_search').setLevel(logging.WARNING)


def setup_logging_verbose():
    """Verbose logging: Show user-relevant progress.

    Shows:
    - Data file loading (dialogue counts)
    - Per-search match counts
    """
    logging.basicConfig(
        level=logging.INFO,
        format='%(levelname)s: %(message)s'
    )
    logging.getLogger('dialogue_search').setLevel(logging.INFO)


def setup_logging_debug():
    """Debug logging: Show everything.

    Shows:
    - Every store lookup and its match count
    - Each redirect followed during recursive searches
    - Full stack traces on unexpected errors
    """
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(name)s - %(levelname)s: %(message)s'
    )
    logging.getLogger('dialogue_search').setLevel(logging.DEBUG)


def setup_logging(verbose: bool = False, debug: bool = False):
    """Pick the logging level from the CLI flags (debug wins over verbose)."""
    if debug:
        setup_logging_debug()
    elif verbose:
        setup_logging_verbose()
    else:
        setup_logging_default()
