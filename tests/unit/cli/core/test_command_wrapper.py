"""Tests for command_wrapper module."""

import json

import pytest
from unittest.mock import patch

from dialogue_search.cli.core.command_wrapper import command_context
from dialogue_search.cli.errors import DataFileNotFoundError, InvalidArgumentError, ResourceNotFoundError


class TestCommandContext:
    """Tests for command_context context manager."""

    def test_successful_execution(self):
        """Test that the body runs and nothing is raised."""
        ran = []
        with command_context("Search failed"):
            ran.append(True)

        assert ran == [True]

    def test_invalid_argument_error_reraises(self):
        with pytest.raises(InvalidArgumentError):
            with command_context("Search failed"):
                raise InvalidArgumentError("Invalid argument")

    def test_resource_not_found_subclass_reraises(self):
        with pytest.raises(ResourceNotFoundError):
            with command_context("Search failed"):
                raise DataFileNotFoundError("missing.yaml")

    @patch('dialogue_search.cli.core.command_wrapper.print_error')
    def test_generic_exception_exits(self, mock_print_error):
        """Test that generic exception prints error and exits."""
        with pytest.raises(SystemExit) as exc_info:
            with command_context("Search failed", output_json=False):
                raise RuntimeError("Something went wrong")

        assert exc_info.value.code == 1
        mock_print_error.assert_called_once_with("Search failed: Something went wrong", False)

    def test_json_error_output(self, capsys):
        with pytest.raises(SystemExit):
            with command_context("Search failed", output_json=True):
                raise RuntimeError("boom")

        output = json.loads(capsys.readouterr().out)
        assert output['status'] == 'error'
        assert output['errors'] == ["Search failed: boom"]
