"""Listing styles for search results.

Each rendered entry corresponds to one top-level dialogue. A dialogue with
resolved redirections renders as a multi-line entry: its own line followed by
its children, each level prefixed with one more ``"=> "``.
"""

from typing import FrozenSet, List, Optional

from .answer import DEFAULT_MAX_ANSWER_LENGTH, format_answer
from .details import DetailCollector, format_details
from .dialogue import Dialogue
from .redirection import RedirectionTable

DEFAULT_QUESTION_TYPE = "问题"
DEFAULT_ANSWER_TYPE = "回答"
REDIRECT_INDENT = "=> "


class ResultRenderer:
    """Render dialogues as text lines.

    Args:
        collector: Source of per-dialogue labels
        redirections: Resolved redirect children, if the search was recursive
        max_answer_length: Truncation length for answer text
    """

    def __init__(
        self,
        collector: Optional[DetailCollector] = None,
        redirections: Optional[RedirectionTable] = None,
        max_answer_length: int = DEFAULT_MAX_ANSWER_LENGTH,
    ):
        self.collector = collector or DetailCollector()
        self.redirections = redirections
        self.max_answer_length = max_answer_length

    def _children(self, dialogue: Dialogue, ancestors: FrozenSet[int]) -> Optional[List[Dialogue]]:
        # A shared instance already expanded higher up the branch is shown as a leaf
        if self.redirections is None or id(dialogue) in ancestors:
            return None
        return self.redirections.get(dialogue)

    def _answer(self, dialogue: Dialogue) -> str:
        return format_answer(dialogue.answer, self.max_answer_length)

    def format_answers(self, dialogues: List[Dialogue], padding: int = 0) -> List[str]:
        """Answer-first style: ``=> `` * depth, prefix, answer."""
        return self._format_answers(dialogues, padding, frozenset())

    def _format_answers(self, dialogues: List[Dialogue], padding: int, ancestors: FrozenSet[int]) -> List[str]:
        output = []
        for dialogue in dialogues:
            line = (
                REDIRECT_INDENT * padding
                + self.collector.format_prefix(dialogue, show_answer_type=True)
                + self._answer(dialogue)
            )
            children = self._children(dialogue, ancestors)
            if children is None:
                output.append(line)
            else:
                nested = self._format_answers(children, padding + 1, ancestors | {id(dialogue)})
                output.append("\n".join([line, *nested]))
        return output

    def format_question_answers(self, dialogues: List[Dialogue]) -> List[str]:
        """Question+answer style; redirect children are shown answer-first."""
        output = []
        for dialogue in dialogues:
            details = self.collector.get_details(dialogue)
            question_type = details.question_type or DEFAULT_QUESTION_TYPE
            answer_type = details.answer_type or DEFAULT_ANSWER_TYPE
            line = (
                f"{format_details(dialogue, details)}"
                f"{question_type}：{dialogue.original}，{answer_type}：{self._answer(dialogue)}"
            )
            children = self._children(dialogue, frozenset())
            if children is None:
                output.append(line)
            else:
                nested = self._format_answers(children, 1, frozenset({id(dialogue)}))
                output.append("\n".join([line, *nested]))
        return output

    def format_questions(self, dialogues: List[Dialogue]) -> List[str]:
        """Question-only style used when searching by exact answer."""
        return [
            f"{self.collector.format_prefix(dialogue)}{dialogue.original}"
            for dialogue in dialogues
        ]
