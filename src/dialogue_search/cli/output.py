"""Output helpers for the dlg CLI.

Text listings go to stdout verbatim through rich. With ``--json`` the same
listing is wrapped in a status envelope, and errors are reported inside the
envelope instead of on stderr.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from rich.console import Console

from ..search import SearchOptions

console = Console()


def format_json_response(
    status: str,
    message: str = "",
    data: Optional[Dict[str, Any]] = None,
    errors: Optional[List[str]] = None
) -> str:
    """Format the JSON envelope shared by search results and errors.

    Args:
        status: "success" or "error"
        message: The rendered listing, or the error summary
        data: Command-specific data (optional)
        errors: List of error messages (optional)

    Returns:
        JSON string; non-ASCII text is written as is
    """
    response = {
        "status": status,
        "message": message,
        "data": data or {},
        "errors": errors or []
    }
    return json.dumps(response, indent=2, ensure_ascii=False)


def search_result_data(options: SearchOptions, output: Optional[str]) -> Dict[str, Any]:
    """Query echo plus the listing split into lines."""
    return {
        "question": options.question,
        "answer": options.answer,
        "keyword": options.keyword,
        "page": options.page,
        "lines": output.split("\n") if output else [],
    }


def print_search_result(options: SearchOptions, output: Optional[str], json_output: bool = False):
    """Print a rendered listing.

    ``output`` is None when a before-search hook stopped the search. Text mode
    then prints nothing; JSON mode still reports success with no lines.
    """
    if json_output:
        print(format_json_response("success", output or "", search_result_data(options, output)))
    elif output:
        # Print listings verbatim: no markup, emoji or wrapping
        console.print(output, markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_error(message: str, json_output: bool = False):
    """Print error message with [ERROR] prefix.

    Args:
        message: Error message
        json_output: If True, print an error envelope to stdout instead
    """
    if json_output:
        print(format_json_response("error", f"[ERROR] {message}", errors=[message]))
    else:
        print(f"[ERROR] {message}", file=sys.stderr)
