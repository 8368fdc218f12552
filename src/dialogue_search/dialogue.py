"""Dialogue records and query specifications.

A dialogue is one stored question/answer pair. The store hands them to the
search layer as plain dataclasses; nothing here is persisted by this package.
"""

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Any, Dict, List, Optional


class DialogueFlag(IntFlag):
    """Behavioral flag bits stored on a dialogue.

    Only ``keyword`` is interpreted by the search layer; the remaining bits
    belong to other collaborators and are carried through untouched.
    """
    frozen = 1
    keyword = 2
    context = 4


@dataclass
class Dialogue:
    """Stored Q&A record.

    Attributes:
        id: Unique, stable identifier
        original: Question text as authored
        answer: Raw answer text (may be a redirect expression)
        flag: Behavioral flag bits
        question: Normalized question text used for exact matching
        probability: Trigger probability in [0, 1]
    """
    id: int
    original: str
    answer: str
    flag: DialogueFlag = DialogueFlag(0)
    question: str = ""
    probability: float = 1.0

    def __post_init__(self):
        self.flag = DialogueFlag(int(self.flag))
        if not self.question:
            self.question = self.original

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Dialogue":
        """Build a dialogue from a mapping loaded from YAML/JSON.

        Raises:
            ValueError: If a required field is missing
        """
        missing = [key for key in ("id", "original", "answer") if key not in data]
        if missing:
            raise ValueError(f"Dialogue is missing required fields: {', '.join(missing)}")

        return cls(
            id=int(data["id"]),
            original=str(data["original"]),
            answer=str(data["answer"]),
            flag=DialogueFlag(int(data.get("flag", 0))),
            question=str(data.get("question") or ""),
            probability=float(data.get("probability", 1.0)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "original": self.original,
            "answer": self.answer,
            "flag": int(self.flag),
            "question": self.question,
            "probability": self.probability,
        }


@dataclass
class DialogueTest:
    """Filter specification for a store lookup.

    ``keyword`` switches question/answer matching from exact to substring
    semantics. ``None`` fields do not constrain the lookup.
    """
    question: Optional[str] = None
    answer: Optional[str] = None
    keyword: Optional[bool] = None


@dataclass
class SearchDetails:
    """Short labels describing one dialogue in a listing.

    ``labels`` are rendered inside the id prefix; ``question_type`` and
    ``answer_type`` replace the default question/answer nouns.
    """
    labels: List[str] = field(default_factory=list)
    question_type: Optional[str] = None
    answer_type: Optional[str] = None

    def append(self, label: str):
        self.labels.append(label)

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self):
        return iter(self.labels)
