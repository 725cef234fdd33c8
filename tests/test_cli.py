"""Tests for the command line interface."""

import json
import pytest
import tempfile
from pathlib import Path

from click.testing import CliRunner

from trace_kb.cli.main import cli


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, temp_dir, *args):
    return runner.invoke(cli, ["--storage-path", str(temp_dir), *args])


def test_add_and_search(runner, temp_dir):
    result = invoke(runner, temp_dir, "add-page", "--title", "Neural Networks",
                    "--url", "https://example.com/nn", "--summary", "intro to neural nets")
    assert result.exit_code == 0
    assert "Stored page 1" in result.output

    invoke(runner, temp_dir, "add-page", "--title", "Cooking",
           "--url", "https://example.com/cooking", "--content", "neural analogy")

    result = invoke(runner, temp_dir, "search", "neural", "--format", "json")

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert [(r["id"], r["score"]) for r in data] == [(1, 5), (2, 1)]
    assert data[0]["kind"] == "page"


def test_search_limit(runner, temp_dir):
    for i in range(3):
        invoke(runner, temp_dir, "add-page", "--title", f"Match {i}",
               "--url", f"https://example.com/{i}")

    result = invoke(runner, temp_dir, "search", "match", "-l", "2", "--format", "json")

    assert len(json.loads(result.output)) == 2


def test_search_without_matches(runner, temp_dir):
    result = invoke(runner, temp_dir, "search", "nothing")

    assert result.exit_code == 0
    assert "No matching content found" in result.output


def test_related_is_empty(runner, temp_dir):
    invoke(runner, temp_dir, "add-page", "--title", "Neural", "--url", "https://example.com/n")

    result = invoke(runner, temp_dir, "related", "1", "--format", "json")

    assert result.exit_code == 0
    assert json.loads(result.output) == []


def test_stats(runner, temp_dir):
    invoke(runner, temp_dir, "add-page", "--title", "One", "--url", "https://example.com/1")

    result = invoke(runner, temp_dir, "stats")

    assert result.exit_code == 0
    assert "Statistics" in result.output


def test_store_failure_exits_nonzero(runner, temp_dir):
    invoke(runner, temp_dir, "stats")
    db_path = temp_dir / "trace.db"
    db_path.unlink()
    db_path.mkdir()

    result = invoke(runner, temp_dir, "search", "anything")

    assert result.exit_code == 1
    assert "Error during search" in result.output


def test_storage_path_is_a_file(runner, temp_dir):
    blocker = temp_dir / "not_a_dir"
    blocker.write_text("")

    result = runner.invoke(cli, ["--storage-path", str(blocker), "search", "anything"])

    assert result.exit_code == 1
    assert "Error during search" in result.output
