"""Tests for configuration loading."""

import pytest

from waves_trade.api.dispatcher import DEFAULT_TIMEOUT
from waves_trade.core.config import DEFAULT_NODE, Config, parse_timeout
from waves_trade.models import AssetPair


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("NODE_URL", "NODE_TIMEOUT", "NODE_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("waves_trade.core.config.DEFAULT_CONFIG_FILE", tmp_path / "missing.yaml")


@pytest.fixture
def yaml_file(tmp_path):
    path = tmp_path / "node.yaml"
    path.write_text(
        "node:\n"
        "  url: http://yaml.node:6869\n"
        "  timeout: 12\n"
        "matcher:\n"
        "  default_pair:\n"
        "    amount_asset: WAVES\n"
        "    price_asset: BTC\n",
        encoding="utf-8",
    )
    return path


def test_defaults():
    config = Config()
    assert config.node_url == DEFAULT_NODE
    assert config.timeout == DEFAULT_TIMEOUT
    assert config.default_pair is None


def test_yaml_config(yaml_file):
    config = Config(yaml_file)
    assert config.node_url == "http://yaml.node:6869"
    assert config.timeout == 12.0
    assert config.default_pair == AssetPair("WAVES", "BTC")


def test_yaml_from_env_path(monkeypatch, yaml_file):
    monkeypatch.setenv("NODE_CONFIG", str(yaml_file))
    assert Config().node_url == "http://yaml.node:6869"


def test_env_overrides_yaml(monkeypatch, yaml_file):
    monkeypatch.setenv("NODE_URL", "http://env.node")
    monkeypatch.setenv("NODE_TIMEOUT", "none")
    config = Config(yaml_file)
    assert config.node_url == "http://env.node"
    assert config.timeout is None


def test_missing_explicit_yaml(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config(tmp_path / "nope.yaml")


@pytest.mark.parametrize("value, expected", [("5", 5.0), (2, 2.0), ("None", None), ("", None), (None, None)])
def test_parse_timeout(value, expected):
    assert parse_timeout(value) == expected


@pytest.mark.parametrize("value", ["abc", "0", "-1"])
def test_parse_timeout_invalid(value):
    with pytest.raises(ValueError):
        parse_timeout(value)


def test_repr_summary(yaml_file):
    assert "WAVES/BTC" in repr(Config(yaml_file))


def test_empty_yaml_sections(tmp_path):
    path = tmp_path / "node.yaml"
    path.write_text("node:\nmatcher:\n", encoding="utf-8")
    config = Config(path)
    assert config.node_url == DEFAULT_NODE
    assert config.timeout == DEFAULT_TIMEOUT
    assert config.default_pair is None
