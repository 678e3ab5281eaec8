import json
from pathlib import Path

import pytest
from pydantic import ValidationError
from sitemapper.config import CrawlerConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("domain: example.com\nconcurrency: 4", ".yaml", None),
        ("domain: example.com\nconcurrency: 4", ".yml", None),
        (json.dumps({"domain": "example.com", "concurrency": 4}), ".json", None),
        ("{}", ".json", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- just\n- a list", ".yaml", TypeError),
        ("{broken", ".json", ValueError),
        ("domain = 'example.com'", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlerConfig)
        assert cfg.domain == "example.com"
        assert cfg.concurrency == 4


def test_defaults():
    cfg = CrawlerConfig(domain="example.com")
    assert cfg.scheme == "https"
    assert cfg.start_path == "/"
    assert cfg.frontier == "fifo"
    assert cfg.fail_fast is False
    assert cfg.crawl_timeout is None
    assert cfg.concurrency >= 1


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


def test_overrides_win_over_file_and_none_is_ignored(tmp_path):
    cfg_path = write_file(tmp_path, "domain: a.example\nconcurrency: 2\ntimeout: 3", ".yaml")
    cfg = load_config(cfg_path, domain="b.example", concurrency=None, timeout=5.0)
    assert cfg.domain == "b.example"
    assert cfg.concurrency == 2
    assert cfg.timeout == 5.0


def test_unknown_keys_rejected(tmp_path):
    cfg_path = write_file(tmp_path, "domain: example.com\nmax_depth: 3", ".yaml")
    with pytest.raises(ValidationError):
        load_config(cfg_path)


@pytest.mark.parametrize(
    "domain", ["https://example.com", "example.com/path", "example.com?x=1", "user@example.com", ""]
)
def test_domain_must_be_bare(domain):
    with pytest.raises(ValidationError):
        CrawlerConfig(domain=domain)


def test_domain_is_lowercased():
    assert CrawlerConfig(domain=" Example.COM ").domain == "example.com"
    assert CrawlerConfig(domain="localhost:8080").domain == "localhost:8080"


def test_start_path_normalized():
    assert CrawlerConfig(domain="example.com", start_path="/docs/").start_path == "/docs"
    with pytest.raises(ValidationError):
        CrawlerConfig(domain="example.com", start_path="docs")


@pytest.mark.parametrize(
    "field,value",
    [("concurrency", 0), ("timeout", 0), ("retry_times", -1), ("frontier", "random"), ("scheme", "ftp")],
)
def test_invalid_values(field, value):
    with pytest.raises(ValidationError):
        CrawlerConfig(domain="example.com", **{field: value})


def test_config_is_frozen():
    cfg = CrawlerConfig(domain="example.com")
    with pytest.raises(ValidationError):
        cfg.concurrency = 3
