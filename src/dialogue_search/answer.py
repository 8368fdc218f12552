"""Answer text handling: redirect parsing and single-line display formatting."""

import re
from dataclasses import dataclass
from typing import Union

REDIRECT_PREFIX = "${dialogue "
IMAGE_PLACEHOLDER = "[图片]"
ELLIPSIS = "…"
ELLIPSIS_MARKER = ELLIPSIS * 2

DEFAULT_MAX_ANSWER_LENGTH = 100

# Real line breaks or the "$n" escape used by the storage format
_LINE_BREAK = re.compile(r"\r?\n|\$n")
_IMAGE_DIRECTIVE = re.compile(r"\[CQ:image,[^\]]+\]")


@dataclass(frozen=True)
class Redirect:
    """Answer that defers to the dialogues of another question."""
    question: str


@dataclass(frozen=True)
class PlainAnswer:
    """Answer that is sent as literal text."""
    text: str


ParsedAnswer = Union[Redirect, PlainAnswer]


def parse_answer(answer: str) -> ParsedAnswer:
    """Classify an answer as a redirect expression or plain text.

    A redirect has the form ``${dialogue <question>}``. The prefix must start
    the answer; a leading space makes it plain text. The closing brace is
    optional and the target question is trimmed. A marker with an empty
    target is treated as plain text.

    Examples:
        >>> parse_answer("${dialogue  hello }")
        Redirect(question='hello')
        >>> parse_answer("hello")
        PlainAnswer(text='hello')
    """
    if not answer.startswith(REDIRECT_PREFIX):
        return PlainAnswer(answer)

    target = answer[len(REDIRECT_PREFIX):]
    if target.endswith("}"):
        target = target[:-1]
    target = target.strip()

    if not target:
        return PlainAnswer(answer)
    return Redirect(target)


def utf16_length(text: str) -> int:
    """Length in UTF-16 code units; characters outside the BMP count twice."""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def truncate_utf16(text: str, limit: int) -> str:
    """Cut ``text`` to at most ``limit`` UTF-16 code units.

    A character that would be split in half is dropped entirely.
    """
    units = 0
    for index, char in enumerate(text):
        units += 2 if ord(char) > 0xFFFF else 1
        if units > limit:
            return text[:index]
    return text


def append_ellipsis(text: str) -> str:
    """Mark text as truncated without ever doubling the marker."""
    if text.endswith(ELLIPSIS_MARKER):
        return text
    if text.endswith(ELLIPSIS):
        return text + ELLIPSIS
    return text + ELLIPSIS_MARKER


def format_answer(source: str, max_answer_length: int = DEFAULT_MAX_ANSWER_LENGTH) -> str:
    """Normalize a raw answer into one display-safe line.

    Only the first line is kept, image directives become ``[图片]`` and the
    result is cut to ``max_answer_length`` UTF-16 code units, so characters
    outside the BMP such as emoji count twice. Truncated output ends with an
    ellipsis marker.

    Args:
        source: Raw answer text
        max_answer_length: Maximum length in UTF-16 code units before cutting

    Returns:
        Formatted single-line answer
    """
    truncated = False

    segments = _LINE_BREAK.split(source, maxsplit=1)
    if len(segments) > 1:
        truncated = True
        source = segments[0].strip()

    source = _IMAGE_DIRECTIVE.sub(IMAGE_PLACEHOLDER, source)

    if utf16_length(source) > max_answer_length:
        truncated = True
        source = truncate_utf16(source, max_answer_length)

    if truncated:
        source = append_ellipsis(source)
    return source
