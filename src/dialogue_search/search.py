"""Dialogue search: query shape dispatch and result presentation.

Flow for one search::

    options -> DialogueTest -> before-search hooks -> lookup
            -> (pipe hand-off) -> (redirect resolution)
            -> render / merge -> paginate -> send
"""

import logging
from typing import Any, Awaitable, Callable, Iterable, List, Optional

from pydantic import BaseModel, Field

from . import messages
from .config import SearchConfig
from .details import DetailCollector
from .dialogue import Dialogue, DialogueTest
from .merge import merge_dialogues
from .pagination import paginate
from .redirection import Lookup, QuestionNormalizer, RedirectionResolver, RedirectionTable
from .render import ResultRenderer

logger = logging.getLogger(__name__)

WeightTotal = Callable[[List[Dialogue], DialogueTest], Awaitable[float]]
BeforeSearchHook = Callable[["SearchOptions", DialogueTest], Optional[bool]]
PipeHandler = Callable[[List[int]], Awaitable[Any]]
Sender = Callable[[str], Awaitable[Any]]


class SearchOptions(BaseModel):
    """Options of one search request.

    ``original`` is the question as the user typed it, used in messages;
    it defaults to ``question``.
    """
    question: Optional[str] = None
    answer: Optional[str] = None
    original: Optional[str] = None
    keyword: bool = False
    page: int = Field(default=1, ge=1)
    auto_merge: bool = False
    recursive: bool = False
    pipe: bool = False

    def to_test(self) -> DialogueTest:
        return DialogueTest(question=self.question, answer=self.answer, keyword=self.keyword)

    @property
    def display_question(self) -> Optional[str]:
        return self.original if self.original is not None else self.question


def format_probability(total: float) -> str:
    """Clamp to 1 and print with at most three decimals, no trailing zeros."""
    return f"{round(min(total, 1), 3):g}"


class DialogueSearch:
    """Run searches against a dialogue store and render the result block.

    Args:
        lookup: Async store lookup
        weight_total: Async aggregate trigger probability, used for the
            probability line of exact question searches
        config: Presentation settings
        collector: Detail hooks for listing labels
        before_search: Hooks called with ``(options, test)`` before the
            lookup; a truthy return aborts the search
        pipe_handler: Receives result ids when ``options.pipe`` is set
        send: Delivery sink for the rendered block
        normalize_question: Redirect target normalizer
    """

    def __init__(
        self,
        lookup: Lookup,
        weight_total: Optional[WeightTotal] = None,
        config: Optional[SearchConfig] = None,
        collector: Optional[DetailCollector] = None,
        before_search: Iterable[BeforeSearchHook] = (),
        pipe_handler: Optional[PipeHandler] = None,
        send: Optional[Sender] = None,
        normalize_question: Optional[QuestionNormalizer] = None,
    ):
        self.lookup = lookup
        self.weight_total = weight_total
        self.config = config or SearchConfig()
        self.collector = collector or DetailCollector()
        self.before_search = list(before_search)
        self.pipe_handler = pipe_handler
        self.send = send
        self.resolver = RedirectionResolver(lookup, normalize_question)

    async def _deliver(self, text: str) -> str:
        if self.send is not None:
            await self.send(text)
        return text

    def _paginate(self, options: SearchOptions, title: str, lines: List[str],
                  suffix: Optional[str] = None) -> str:
        return paginate(title, lines, options.page, self.config.items_per_page, suffix)

    async def search(self, options: SearchOptions) -> Optional[str]:
        """Run one search and return the rendered block.

        Returns ``None`` when a before-search hook took over the request, and
        the pipe handler's result for pipe searches.

        Raises:
            Exception: Lookup and weight failures propagate unchanged
        """
        test = options.to_test()
        for hook in self.before_search:
            if hook(options, test):
                logger.debug("Search handled by before-search hook")
                return None

        dialogues = await self.lookup(test)
        logger.info(f"Search {test} matched {len(dialogues)} dialogue(s)")

        if options.pipe:
            if not dialogues:
                return await self._deliver(messages.NO_DIALOGUES)
            if self.pipe_handler is None:
                raise ValueError("Pipe search requested without a pipe handler")
            return await self.pipe_handler([dialogue.id for dialogue in dialogues])

        redirections: Optional[RedirectionTable] = None
        if options.recursive:
            redirections = await self.resolver.resolve(dialogues, test)

        renderer = ResultRenderer(self.collector, redirections, self.config.max_answer_length)
        text = await self._render(options, test, dialogues, renderer)
        return await self._deliver(text)

    async def _render(self, options: SearchOptions, test: DialogueTest,
                      dialogues: List[Dialogue], renderer: ResultRenderer) -> str:
        question = options.question
        answer = options.answer
        display = {"question": options.display_question, "answer": answer}

        if not question and not answer:
            if not dialogues:
                return messages.NO_ANSWERS_IN_CONTEXT
            return self._paginate(options, messages.ALL_DIALOGUES, renderer.format_question_answers(dialogues))

        if not options.keyword:
            return await self._render_exact(options, test, dialogues, renderer, display)

        if not options.auto_merge or (question and answer):
            output = renderer.format_question_answers(dialogues)
        else:
            output = merge_dialogues(dialogues, bool(question), self.config.merge_threshold)

        if not question:
            if not dialogues:
                return messages.NO_ANSWER_KEYWORD.format(**display)
            return self._paginate(options, messages.ANSWER_KEYWORD_RESULTS.format(**display), output)
        if not answer:
            if not dialogues:
                return messages.NO_QUESTION_KEYWORD.format(**display)
            return self._paginate(options, messages.QUESTION_KEYWORD_RESULTS.format(**display), output)
        if not dialogues:
            return messages.NO_DIALOGUE_KEYWORD.format(**display)
        return self._paginate(options, messages.DIALOGUE_KEYWORD_RESULTS.format(**display), output)

    async def _render_exact(self, options: SearchOptions, test: DialogueTest,
                            dialogues: List[Dialogue], renderer: ResultRenderer,
                            display: dict) -> str:
        if not options.question:
            if not dialogues:
                return messages.NO_ANSWER.format(**display)
            return self._paginate(
                options,
                messages.QUESTIONS_FOR_ANSWER.format(**display),
                renderer.format_questions(dialogues),
            )

        if not options.answer:
            if not dialogues:
                return messages.NO_QUESTION.format(**display)
            suffix = ""
            if len(dialogues) > 1 and self.weight_total is not None:
                total = await self.weight_total(dialogues, test)
                suffix = messages.TRIGGER_PROBABILITY.format(probability=format_probability(total))
            return self._paginate(
                options,
                messages.ANSWERS_FOR_QUESTION.format(**display),
                renderer.format_answers(dialogues),
                suffix,
            )

        if not dialogues:
            return messages.NO_DIALOGUE.format(**display)
        ids = ", ".join(str(dialogue.id) for dialogue in dialogues)
        return self._paginate(options, messages.DIALOGUE_MATCHES.format(**display), [ids])
