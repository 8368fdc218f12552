"""Redirect chain resolution for recursive searches.

An answer of the form ``${dialogue <question>}`` means "respond as if the
question were <question>". For a recursive search every such dialogue is
expanded into the dialogues of its target question, depth-first, building a
tree of related dialogues.

The tree lives in a side table keyed by dialogue instance instead of on the
dialogue records, so the same records can be shared between searches.
"""

import logging
from typing import Awaitable, Callable, Dict, List, Optional, Tuple

from .answer import Redirect, parse_answer
from .dialogue import Dialogue, DialogueTest

logger = logging.getLogger(__name__)

Lookup = Callable[[DialogueTest], Awaitable[List[Dialogue]]]
QuestionNormalizer = Callable[[str], str]


class RedirectionTable:
    """Resolved redirect children per dialogue instance for one search.

    Entries are keyed by object identity, not by ``Dialogue.id``: a store may
    return several copies of one record, and only the copy that was actually
    resolved owns children. A missing entry means the dialogue is not a
    redirect (or its target was already visited); an empty list means it was
    resolved with no matches. Entries are written once.
    """

    def __init__(self):
        self._entries: Dict[int, Tuple[Dialogue, List[Dialogue]]] = {}

    def set(self, dialogue: Dialogue, children: List[Dialogue]):
        if id(dialogue) in self._entries:
            raise ValueError(f"Redirections for dialogue {dialogue.id} already resolved")
        # Holding the dialogue keeps its id() from being reused
        self._entries[id(dialogue)] = (dialogue, children)

    def get(self, dialogue: Dialogue) -> Optional[List[Dialogue]]:
        entry = self._entries.get(id(dialogue))
        return entry[1] if entry is not None else None

    def __contains__(self, dialogue: Dialogue) -> bool:
        return id(dialogue) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def as_dict(self) -> Dict[int, List[int]]:
        """Dialogue id -> child ids, for debugging and JSON output."""
        return {
            dialogue.id: [child.id for child in children]
            for dialogue, children in self._entries.values()
        }


class RedirectionResolver:
    """Follow redirect answers to build a tree of related dialogues.

    Each distinct question text is looked up at most once per ``resolve``
    call. A redirect to a question that was already visited gets no entry
    and is not descended into, which bounds the walk even when the store
    holds cyclic redirects.

    Args:
        lookup: Async store lookup
        normalize_question: Optional hook turning a redirect target into the
            question text used for lookups (defaults to the trimmed target)
    """

    def __init__(self, lookup: Lookup, normalize_question: Optional[QuestionNormalizer] = None):
        self.lookup = lookup
        self.normalize_question = normalize_question

    async def resolve(self, dialogues: List[Dialogue], test: DialogueTest) -> RedirectionTable:
        """Resolve redirects reachable from ``dialogues``.

        Args:
            dialogues: Root result set of the search
            test: Test that produced the root set; redirect lookups reuse
                its answer constraint with keyword matching disabled

        Returns:
            Side table of resolved children

        Raises:
            Exception: Whatever the lookup raises; no retry is attempted
        """
        table = RedirectionTable()
        visited: Dict[Optional[str], List[Dialogue]] = {test.question: dialogues}
        await self._walk(dialogues, test, visited, table)
        logger.debug(
            f"Resolved {len(table)} redirection(s) across {len(visited)} question(s)"
        )
        return table

    async def _walk(
        self,
        dialogues: List[Dialogue],
        test: DialogueTest,
        visited: Dict[Optional[str], List[Dialogue]],
        table: RedirectionTable,
    ):
        for dialogue in dialogues:
            parsed = parse_answer(dialogue.answer)
            if not isinstance(parsed, Redirect):
                continue

            question = parsed.question
            if self.normalize_question is not None:
                question = self.normalize_question(question)
            if question in visited:
                continue

            logger.debug(f"Dialogue {dialogue.id} redirects to \"{question}\"")
            children = await self.lookup(
                DialogueTest(question=question, answer=test.answer, keyword=False)
            )
            visited[question] = children
            table.set(dialogue, children)
            await self._walk(children, test, visited, table)
