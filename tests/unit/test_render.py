"""Tests for the answer-first and question+answer listing styles."""

from dialogue_search.details import DetailCollector
from dialogue_search.dialogue import Dialogue, DialogueFlag
from dialogue_search.redirection import RedirectionTable
from dialogue_search.render import ResultRenderer


def typed_hook(dialogue, details, context):
    details.question_type = "问"
    details.answer_type = "答"


class TestFormatAnswers:
    """Tests for ResultRenderer.format_answers."""

    def test_flat(self):
        renderer = ResultRenderer()
        dialogues = [
            Dialogue(id=1, original="hi", answer="hello"),
            Dialogue(id=2, original="hi", answer="line one\nline two"),
        ]
        assert renderer.format_answers(dialogues) == ["1. hello", "2. line one……"]

    def test_padding(self):
        renderer = ResultRenderer()
        assert renderer.format_answers([Dialogue(id=1, original="hi", answer="x")], padding=2) == ["=> => 1. x"]

    def test_answer_type_shown(self):
        renderer = ResultRenderer(DetailCollector([typed_hook]))
        assert renderer.format_answers([Dialogue(id=1, original="hi", answer="x")]) == ["1. [问] [答] x"]

    def test_redirect_children_in_one_entry(self):
        parent = Dialogue(id=3, original="start", answer="${dialogue target}")
        child = Dialogue(id=4, original="target", answer="ok")
        table = RedirectionTable()
        table.set(parent, [child])

        output = ResultRenderer(redirections=table).format_answers([parent])

        assert output == ["3. ${dialogue target}\n=> 4. ok"]
        assert output[0].split("\n")[1].startswith("=> ")

    def test_nested_children(self):
        a = Dialogue(id=1, original="a", answer="${dialogue b}")
        b = Dialogue(id=2, original="b", answer="${dialogue c}")
        c = Dialogue(id=3, original="c", answer="end")
        table = RedirectionTable()
        table.set(a, [b])
        table.set(b, [c])

        output = ResultRenderer(redirections=table).format_answers([a])

        assert output == ["1. ${dialogue b}\n=> 2. ${dialogue c}\n=> => 3. end"]

    def test_empty_children(self):
        parent = Dialogue(id=3, original="start", answer="${dialogue nowhere}")
        table = RedirectionTable()
        table.set(parent, [])

        assert ResultRenderer(redirections=table).format_answers([parent]) == ["3. ${dialogue nowhere}"]

    def test_ancestor_not_expanded_again(self):
        """A shared instance that reappears below itself is rendered as a leaf."""
        a = Dialogue(id=1, original="a", answer="${dialogue b}")
        b = Dialogue(id=2, original="b", answer="${dialogue a}")
        table = RedirectionTable()
        table.set(a, [b])
        table.set(b, [a])

        output = ResultRenderer(redirections=table).format_answers([a])

        assert output == ["1. ${dialogue b}\n=> 2. ${dialogue a}\n=> => 1. ${dialogue b}"]

    def test_unresolved_copy_is_a_leaf(self):
        """Children belong to the resolved instance, not to every copy with its id."""
        resolved = Dialogue(id=2, original="b", answer="${dialogue c}")
        copy = Dialogue(id=2, original="b", answer="${dialogue c}")
        table = RedirectionTable()
        table.set(resolved, [Dialogue(id=3, original="c", answer="end")])

        output = ResultRenderer(redirections=table).format_answers([resolved, copy])

        assert output == ["2. ${dialogue c}\n=> 3. end", "2. ${dialogue c}"]

    def test_max_answer_length(self):
        renderer = ResultRenderer(max_answer_length=3)
        assert renderer.format_answers([Dialogue(id=1, original="hi", answer="abcdef")]) == ["1. abc……"]


class TestFormatQuestionAnswers:
    """Tests for ResultRenderer.format_question_answers."""

    def test_default_labels(self):
        renderer = ResultRenderer()
        output = renderer.format_question_answers([Dialogue(id=7, original="hi", answer="hello")])
        assert output == ["7. 问题：hi，回答：hello"]

    def test_hook_labels(self):
        renderer = ResultRenderer(DetailCollector([typed_hook]))
        output = renderer.format_question_answers([Dialogue(id=7, original="hi", answer="hello")])
        assert output == ["7. 问：hi，答：hello"]

    def test_keyword_question_label(self):
        dialogue = Dialogue(id=7, original="hel", answer="hello", flag=DialogueFlag.keyword)
        assert ResultRenderer().format_question_answers([dialogue]) == ["7. 关键词：hel，回答：hello"]

    def test_children_rendered_answer_first(self):
        parent = Dialogue(id=3, original="start", answer="${dialogue target}")
        child = Dialogue(id=4, original="target", answer="ok")
        table = RedirectionTable()
        table.set(parent, [child])

        output = ResultRenderer(redirections=table).format_question_answers([parent])

        assert output == ["3. 问题：start，回答：${dialogue target}\n=> 4. ok"]


class TestFormatQuestions:
    """Tests for ResultRenderer.format_questions."""

    def test_questions(self):
        dialogues = [
            Dialogue(id=1, original="hi", answer="hello"),
            Dialogue(id=4, original="hel", answer="hello", flag=DialogueFlag.keyword),
        ]
        assert ResultRenderer().format_questions(dialogues) == ["1. hi", "4. [关键词] hel"]
