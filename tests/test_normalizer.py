# File: tests/test_normalizer.py
import pytest

from sitemapper.crawler.normalizer import normalize, strip_trailing_slash
from sitemapper.errors import (
    CrossDomainTarget,
    EmptyPath,
    LinkRejected,
    MalformedTarget,
    RelativeDotTarget,
    UnsupportedScheme,
)

HOST = "example.com"


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/", "/"),
        ("/foo/", "/foo"),
        ("/foo", "/foo"),
        ("/foo//", "/foo/"),
        ("", ""),
    ],
)
def test_strip_trailing_slash(path, expected):
    assert strip_trailing_slash(path) == expected


@pytest.mark.parametrize("path", ["/", "/a", "/a/b", "/docs/index.html", "/a%20b"])
def test_canonical_paths_are_fixed_points(path):
    assert normalize(HOST, "/somewhere", path) == path


def test_trailing_slash_collapse():
    assert normalize(HOST, "/", "/foo/") == normalize(HOST, "/", "/foo") == "/foo"


@pytest.mark.parametrize(
    "target",
    [
        "http://other.example.com/",
        "http://other.example.com/x",
        "https://other.example.com/a/b/",
        "//other.example.com/x",
    ],
)
def test_cross_domain_rejected(target):
    with pytest.raises(CrossDomainTarget):
        normalize(HOST, "/", target)


def test_same_host_absolute_url_accepted():
    assert normalize(HOST, "/", "https://example.com/about/") == "/about"
    assert normalize(HOST, "/", "http://EXAMPLE.com/about") == "/about"


def test_host_with_port_must_match():
    assert normalize("localhost:8080", "/", "http://localhost:8080/x") == "/x"
    with pytest.raises(CrossDomainTarget):
        normalize("localhost:8080", "/", "http://localhost:9090/x")


def test_ipv6_host_keeps_brackets():
    assert normalize("[::1]:8080", "/", "http://[::1]:8080/x/") == "/x"
    assert normalize("[::1]", "/", "http://[::1]/x") == "/x"
    with pytest.raises(CrossDomainTarget):
        normalize("[::1]:8080", "/", "http://[::1]:9090/x")


def test_userinfo_and_empty_port_ignored():
    assert normalize(HOST, "/", "https://user@example.com/x") == "/x"
    assert normalize(HOST, "/", "https://example.com:/x") == "/x"


@pytest.mark.parametrize("target", ["#top", "?page=2", "https://example.com", "//example.com"])
def test_empty_path_rejected(target):
    with pytest.raises(EmptyPath):
        normalize(HOST, "/", target)


@pytest.mark.parametrize("target", ["./local", "../up", "."])
def test_dot_relative_rejected(target):
    with pytest.raises(RelativeDotTarget):
        normalize(HOST, "/a", target)


@pytest.mark.parametrize("target", ["mailto:me@example.com", "javascript:void(0)", "tel:+123"])
def test_non_page_schemes_rejected(target):
    with pytest.raises(UnsupportedScheme):
        normalize(HOST, "/", target)


@pytest.mark.parametrize("target", ["http://[::1/x", "http://example.com:notaport/x"])
def test_malformed_target_rejected(target):
    with pytest.raises(MalformedTarget):
        normalize(HOST, "/", target)


def test_rejections_share_base_class():
    with pytest.raises(LinkRejected):
        normalize(HOST, "/", "./x")


@pytest.mark.parametrize(
    "current,target,expected",
    [
        ("/", "sibling", "/sibling"),
        ("/a", "b", "/a/b"),
        ("/a", "b/", "/a/b"),
        ("/a/b", "c/d", "/a/b/c/d"),
    ],
)
def test_relative_to_current_page(current, target, expected):
    assert normalize(HOST, current, target) == expected


def test_query_and_fragment_dropped():
    assert normalize(HOST, "/", "/search?q=x#results") == "/search"
