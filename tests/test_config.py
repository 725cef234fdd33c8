"""Tests for configuration and the knowledge base facade."""

import json
import pytest
import tempfile
from pathlib import Path

from trace_kb.application.config import Config
from trace_kb.application.engine import KnowledgeBase
from trace_kb.domain.models import ContentKind, Page
from trace_kb.retrieval.related import TitleMatchRelated


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


def test_config_defaults():
    config = Config()

    assert config.search.default_limit == 10
    assert config.search.related_limit == 5
    assert config.search.related_strategy == "none"
    assert config.storage.backend == "sqlite"
    assert config.storage.db_path == config.storage_path / "trace.db"


def test_config_from_environment(monkeypatch):
    monkeypatch.setenv("TRACE_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("TRACE_SEARCH__DEFAULT_LIMIT", "3")

    config = Config()

    assert config.log_level == "DEBUG"
    assert config.search.default_limit == 3


@pytest.mark.parametrize("suffix", [".json", ".yaml"])
def test_config_file_round_trip(temp_dir, suffix):
    config = Config(storage_path=temp_dir, search={"related_strategy": "title"})
    path = temp_dir / f"config{suffix}"

    config.save_to_file(path)
    loaded = Config.load_from_file(path)

    assert loaded.search.related_strategy == "title"
    assert loaded.storage_path == temp_dir


def test_explicit_db_path_is_kept(temp_dir):
    config = Config(storage_path=temp_dir, storage={"db_path": temp_dir / "custom.db"})

    assert config.storage.db_path == temp_dir / "custom.db"


def test_db_path_from_environment(monkeypatch, temp_dir):
    monkeypatch.setenv("TRACE_STORAGE__DB_PATH", str(temp_dir / "env.db"))

    config = Config(storage_path=temp_dir)

    assert config.storage.db_path == temp_dir / "env.db"


def test_config_rejects_unknown_format(temp_dir):
    path = temp_dir / "config.toml"
    path.write_text("")

    with pytest.raises(ValueError):
        Config.load_from_file(path)


def test_knowledge_base_search(temp_dir):
    kb = KnowledgeBase(Config(storage_path=temp_dir))
    kb.add_record(Page(title="Neural Networks", url="https://example.com/nn",
                       content="deep learning basics", summary="intro to neural nets"))
    kb.add_record(Page(title="Cooking", url="https://example.com/cooking",
                       content="neural networks are tasty analogy"))

    results = kb.search("Neural")

    assert [(r.id, r.score) for r in results] == [(1, 5), (2, 1)]
    assert (temp_dir / "trace.db").exists()


def test_knowledge_base_default_limit(temp_dir):
    config = Config(storage_path=temp_dir, search={"default_limit": 2})
    kb = KnowledgeBase(config)
    for i in range(5):
        kb.add_record(Page(title=f"Match {i}", url=f"https://example.com/{i}"))

    assert len(kb.search("match")) == 2
    assert len(kb.search("match", limit=4)) == 4


def test_knowledge_base_memory_backend():
    config = Config(storage={"backend": "memory"})
    kb = KnowledgeBase(config)
    kb.add_record(Page(title="Only in memory", url="https://example.com/m"))

    assert [r.title for r in kb.search("memory")] == ["Only in memory"]
    assert kb.get_statistics()['store']['backend'] == 'memory'


def test_knowledge_base_related(temp_dir):
    kb = KnowledgeBase(Config(storage_path=temp_dir))
    page = kb.add_record(Page(title="Neural Networks", url="https://example.com/nn"))
    kb.add_record(Page(title="More neural networks", url="https://example.com/more"))

    assert kb.related(page.id, ContentKind.PAGE) == []


def test_knowledge_base_title_strategy(temp_dir):
    config = Config(storage_path=temp_dir, search={"related_strategy": "title"})
    kb = KnowledgeBase(config)
    page = kb.add_record(Page(title="Neural Networks", url="https://example.com/nn"))
    kb.add_record(Page(title="More neural networks", url="https://example.com/more"))

    kb.initialize()
    assert isinstance(kb.service.related_strategy, TitleMatchRelated)
    assert [r.title for r in kb.related(page.id, "page")] == ["More neural networks"]


def test_knowledge_base_statistics(temp_dir):
    kb = KnowledgeBase(Config(storage_path=temp_dir))
    kb.add_record(Page(title="One", url="https://example.com/1"))

    stats = kb.get_statistics()

    assert stats['store']['total_pages'] == 1
    assert stats['search']['default_limit'] == 10
    assert json.dumps(stats)
