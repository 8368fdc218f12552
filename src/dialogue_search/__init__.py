"""Dialogue search: lookup, redirect resolution and paginated listings for Q&A knowledge bases."""

__version__ = "0.1.0"

from .answer import PlainAnswer, Redirect, format_answer, parse_answer
from .config import DialogueSearchConfig, SearchConfig, load_config
from .details import DetailCollector, format_details
from .dialogue import Dialogue, DialogueFlag, DialogueTest, SearchDetails
from .merge import merge_dialogues
from .pagination import paginate
from .redirection import RedirectionResolver, RedirectionTable
from .render import ResultRenderer
from .search import DialogueSearch, SearchOptions
from .store import DialogueStore

__all__ = [
    "__version__",
    # Records
    "Dialogue",
    "DialogueFlag",
    "DialogueTest",
    "SearchDetails",
    # Answers
    "Redirect",
    "PlainAnswer",
    "parse_answer",
    "format_answer",
    # Presentation
    "DetailCollector",
    "format_details",
    "ResultRenderer",
    "merge_dialogues",
    "paginate",
    # Redirections
    "RedirectionResolver",
    "RedirectionTable",
    # Search
    "DialogueSearch",
    "SearchOptions",
    # Store and config
    "DialogueStore",
    "DialogueSearchConfig",
    "SearchConfig",
    "load_config",
]
