import pytest

from tfidf_corpus.config import DEFAULT_CONFIG, deep_merge, load_config
from tfidf_corpus.errors import ConfigurationError


def test_defaults_without_file():
    config = load_config()
    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG


def test_defaults_are_not_mutated():
    config = load_config()
    config["corpus"]["seed_documents"].append("changed")
    assert DEFAULT_CONFIG["corpus"]["seed_documents"] == []


def test_file_is_merged_over_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "logging:\n"
        "  level: DEBUG\n"
        "corpus:\n"
        "  seed_documents:\n"
        "    - this is a test document\n",
        encoding="utf-8",
    )
    config = load_config(path)
    assert config["logging"]["level"] == "DEBUG"
    assert config["storage"]["database"] == ":memory:"
    assert config["corpus"]["seed_documents"] == ["this is a test document"]


def test_overrides_apply_last(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("logging:\n  level: DEBUG\n", encoding="utf-8")
    config = load_config(path, {"logging": {"level": "WARNING"}})
    assert config["logging"]["level"] == "WARNING"


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == DEFAULT_CONFIG


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(tmp_path / "nope.yaml")


def test_malformed_yaml_raises(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("logging: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(path)


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list\n",
        "corpus:\n  seed_documents: not-a-list\n",
        "corpus:\n  seed_documents:\n    - 1\n",
        "storage: null\n",
    ],
)
def test_invalid_shapes_raise(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(path)


def test_deep_merge():
    base = {"a": {"b": 1, "c": 2}, "d": 3}
    merged = deep_merge(base, {"a": {"b": 10}, "e": 4})
    assert merged == {"a": {"b": 10, "c": 2}, "d": 3, "e": 4}
    assert base["a"]["b"] == 1
