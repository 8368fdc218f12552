"""Tests for CLI output helpers."""

import json

from dialogue_search.cli.output import (
    format_json_response,
    print_error,
    print_search_result,
    search_result_data,
)
from dialogue_search.search import SearchOptions


class TestFormatJsonResponse:
    """Tests for the JSON envelope."""

    def test_defaults(self):
        output = json.loads(format_json_response("success"))
        assert output == {"status": "success", "message": "", "data": {}, "errors": []}

    def test_chinese_written_as_is(self):
        text = format_json_response("success", "问题“hi”的回答如下：")
        assert "问题“hi”的回答如下：" in text
        assert "\\u" not in text


class TestSearchResultData:
    """Tests for search_result_data."""

    def test_lines_and_query(self):
        options = SearchOptions(question="hi", page=2)
        data = search_result_data(options, "问题“hi”的回答如下：\n7. hello")

        assert data == {
            "question": "hi",
            "answer": None,
            "keyword": False,
            "page": 2,
            "lines": ["问题“hi”的回答如下：", "7. hello"],
        }

    def test_no_output(self):
        assert search_result_data(SearchOptions(question="hi"), None)["lines"] == []


class TestPrintSearchResult:
    """Tests for print_search_result."""

    def test_text_printed_verbatim(self, capsys):
        print_search_result(SearchOptions(question="hi"), "7. [问题] [回答] hello :smile:")

        assert capsys.readouterr().out == "7. [问题] [回答] hello :smile:\n"

    def test_nothing_printed_without_output(self, capsys):
        print_search_result(SearchOptions(question="hi"), None)

        assert capsys.readouterr().out == ""

    def test_json_without_output(self, capsys):
        print_search_result(SearchOptions(question="hi"), None, json_output=True)

        output = json.loads(capsys.readouterr().out)
        assert output["status"] == "success"
        assert output["message"] == ""
        assert output["data"]["lines"] == []


class TestPrintError:
    """Tests for print_error."""

    def test_text_goes_to_stderr(self, capsys):
        print_error("Data file not found: x.yaml")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "[ERROR] Data file not found: x.yaml\n"

    def test_json_envelope_on_stdout(self, capsys):
        print_error("Search failed: 连接失败", json_output=True)

        captured = capsys.readouterr()
        assert captured.err == ""
        output = json.loads(captured.out)
        assert output["status"] == "error"
        assert output["message"] == "[ERROR] Search failed: 连接失败"
        assert output["errors"] == ["Search failed: 连接失败"]
        assert output["data"] == {}
