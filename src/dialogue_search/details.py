"""Per-dialogue labels contributed by registered detail hooks."""

from typing import Any, Callable, Iterable, List, Optional

from .dialogue import Dialogue, DialogueFlag, SearchDetails

KEYWORD_QUESTION_TYPE = "关键词"

DetailHook = Callable[[Dialogue, SearchDetails, Any], None]


class DetailCollector:
    """Collect short descriptive labels for dialogues in a listing.

    Hooks are called in registration order with ``(dialogue, details,
    context)`` and may append labels or set ``question_type`` and
    ``answer_type``. Keyword dialogues always end up with the keyword
    question type, whatever the hooks set.
    """

    def __init__(self, hooks: Iterable[DetailHook] = (), context: Any = None):
        self._hooks: List[DetailHook] = list(hooks)
        self.context = context

    def register(self, hook: DetailHook) -> DetailHook:
        """Register a hook. Returns it so this can be used as a decorator."""
        self._hooks.append(hook)
        return hook

    @property
    def hooks(self) -> List[DetailHook]:
        return list(self._hooks)

    def get_details(self, dialogue: Dialogue) -> SearchDetails:
        details = SearchDetails()
        for hook in self._hooks:
            hook(dialogue, details, self.context)
        if dialogue.flag & DialogueFlag.keyword:
            details.question_type = KEYWORD_QUESTION_TYPE
        return details

    def format_prefix(self, dialogue: Dialogue, show_answer_type: bool = False,
                      details: Optional[SearchDetails] = None) -> str:
        """Render the id/labels prefix followed by the type tags."""
        if details is None:
            details = self.get_details(dialogue)
        result = format_details(dialogue, details)
        if details.question_type:
            result += f"[{details.question_type}] "
        if show_answer_type and details.answer_type:
            result += f"[{details.answer_type}] "
        return result


def format_details(dialogue: Dialogue, details: SearchDetails) -> str:
    """Render ``"{id}. "`` or ``"{id}. [label, label] "``."""
    if not len(details):
        return f"{dialogue.id}. "
    return f"{dialogue.id}. [{', '.join(details)}] "
