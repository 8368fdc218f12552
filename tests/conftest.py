"""Shared pytest fixtures for dialogue search tests."""

import os
import tempfile
from pathlib import Path

import pytest
import yaml

from dialogue_search.dialogue import Dialogue, DialogueFlag
from dialogue_search.store import DialogueStore


# ============================================================================
# Auto-mark tests based on directory
# ============================================================================

def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        test_path = str(item.fspath)

        if '/tests/unit/' in test_path or '\\tests\\unit\\' in test_path:
            item.add_marker(pytest.mark.unit)
        elif '/tests/integration/' in test_path or '\\tests\\integration\\' in test_path:
            item.add_marker(pytest.mark.integration)
        elif '/tests/e2e/' in test_path or '\\tests\\e2e\\' in test_path:
            item.add_marker(pytest.mark.e2e)


# ============================================================================
# Dialogue Fixtures
# ============================================================================

@pytest.fixture
def sample_dialogues():
    """A small knowledge base with a redirect chain and keyword dialogues."""
    return [
        Dialogue(id=1, original="hi", answer="hello"),
        Dialogue(id=2, original="hi", answer="hey there", probability=0.5),
        Dialogue(id=3, original="greeting", answer="${dialogue hi}"),
        Dialogue(id=4, original="hello world", answer="hello", flag=DialogueFlag.keyword),
        Dialogue(id=5, original="bye", answer="see you[CQ:image,file=wave.png]"),
    ]


@pytest.fixture
def store(sample_dialogues):
    """In-memory store over the sample dialogues."""
    return DialogueStore(sample_dialogues)


# ============================================================================
# File System Fixtures
# ============================================================================

@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def data_file(temp_dir, sample_dialogues):
    """Write the sample dialogues to a YAML data file."""
    path = temp_dir / "dialogues.yaml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(
            {"dialogues": [d.to_dict() for d in sample_dialogues]},
            f,
            allow_unicode=True,
        )
    yield path


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture
def clean_env(temp_dir):
    """Point config/data lookups at an empty temp directory."""
    env_vars = ['DLG_CONFIG', 'XDG_CONFIG_HOME', 'XDG_DATA_HOME']
    old_values = {}
    for var in env_vars:
        old_values[var] = os.environ.pop(var, None)

    os.environ['XDG_CONFIG_HOME'] = str(temp_dir / "config")
    os.environ['XDG_DATA_HOME'] = str(temp_dir / "data")

    yield

    for var in env_vars:
        os.environ.pop(var, None)
        if old_values[var] is not None:
            os.environ[var] = old_values[var]


# ============================================================================
# CLI Runner Fixture
# ============================================================================

@pytest.fixture
def cli_runner():
    """Provide Click's CliRunner for testing CLI commands."""
    from click.testing import CliRunner
    return CliRunner()
