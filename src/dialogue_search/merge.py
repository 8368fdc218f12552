"""Collapse keyword search results that share identical text."""

from typing import Dict, List

from .dialogue import Dialogue

DEFAULT_MERGE_THRESHOLD = 5


def group_dialogue_ids(dialogues: List[Dialogue], by_question: bool) -> Dict[str, List[int]]:
    """Group dialogue ids by question text or by answer text.

    Keys and ids keep first-encountered order.
    """
    groups: Dict[str, List[int]] = {}
    for dialogue in dialogues:
        key = dialogue.original if by_question else dialogue.answer
        groups.setdefault(key, []).append(dialogue.id)
    return groups


def merge_dialogues(
    dialogues: List[Dialogue],
    by_question: bool,
    merge_threshold: int = DEFAULT_MERGE_THRESHOLD,
) -> List[str]:
    """Render one line per distinct text.

    Groups of at most ``merge_threshold`` members list their ids
    (``"text (#1, #2)"``); larger groups show a count
    (``"text (共 6 个回答)"``). The counted noun is 回答 when grouping by
    question text and 问题 when grouping by answer text.

    Args:
        dialogues: Keyword search results
        by_question: Group by question text (question keyword search)
        merge_threshold: Largest group rendered as an id list

    Returns:
        Rendered lines
    """
    noun = "回答" if by_question else "问题"
    output = []
    for key, ids in group_dialogue_ids(dialogues, by_question).items():
        if len(ids) <= merge_threshold:
            output.append(f"{key} (#{', #'.join(str(i) for i in ids)})")
        else:
            output.append(f"{key} (共 {len(ids)} 个{noun})")
    return output
