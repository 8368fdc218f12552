"""In-memory reference dialogue store.

Satisfies the lookup and weight contracts the search layer consumes, using
plain exact/substring matching. Production deployments plug in their own
store; this one backs the CLI and tests.
"""

import logging
from pathlib import Path
from dataclasses import replace
from typing import Iterable, List

import yaml

from .dialogue import Dialogue, DialogueTest

logger = logging.getLogger(__name__)


class DialogueStore:
    """Dialogues held in memory, in insertion order.

    Lookups return copies so callers never share records with the store.
    """

    def __init__(self, dialogues: Iterable[Dialogue] = ()):
        self._dialogues: List[Dialogue] = []
        for dialogue in dialogues:
            self.add(dialogue)

    def add(self, dialogue: Dialogue):
        if any(existing.id == dialogue.id for existing in self._dialogues):
            raise ValueError(f"Duplicate dialogue id: {dialogue.id}")
        self._dialogues.append(dialogue)

    def __len__(self) -> int:
        return len(self._dialogues)

    @classmethod
    def from_yaml(cls, path: Path) -> "DialogueStore":
        """Load dialogues from a YAML file with a top-level ``dialogues`` list.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file content is malformed
        """
        if not path.exists():
            raise FileNotFoundError(f"Dialogue data file not found: {path}")

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        entries = data.get("dialogues", []) if isinstance(data, dict) else None
        if not isinstance(entries, list):
            raise ValueError(f"Expected a 'dialogues' list in {path}")

        store = cls(Dialogue.from_dict(entry) for entry in entries)
        logger.info(f"Loaded {len(store)} dialogues from {path}")
        return store

    def matches(self, dialogue: Dialogue, test: DialogueTest) -> bool:
        if test.question is not None:
            if test.keyword:
                if test.question not in dialogue.original:
                    return False
            elif dialogue.question != test.question:
                return False
        if test.answer is not None:
            if test.keyword:
                if test.answer not in dialogue.answer:
                    return False
            elif dialogue.answer != test.answer:
                return False
        return True

    async def get_dialogues(self, test: DialogueTest) -> List[Dialogue]:
        """Return copies of all dialogues matching ``test``."""
        result = [
            replace(dialogue)
            for dialogue in self._dialogues
            if self.matches(dialogue, test)
        ]
        logger.debug(f"Lookup {test} matched {len(result)} dialogue(s)")
        return result

    async def total_weight(self, dialogues: List[Dialogue], test: DialogueTest) -> float:
        """Aggregate trigger probability of the candidate dialogues."""
        return sum(dialogue.probability for dialogue in dialogues)
