from __future__ import annotations

import pytest

from resweave.errors import MalformedSchemeError
from resweave.ids import parse_resource_id, validate_scheme


def test_parse_scheme_and_path():
    parsed = parse_resource_id("classpath:/email/hello.html")
    assert parsed.scheme == "classpath:"
    assert parsed.path == "/email/hello.html"
    assert parsed.has_scheme


def test_parse_without_scheme():
    parsed = parse_resource_id("/email/hello.html")
    assert parsed.scheme == ""
    assert parsed.path == "/email/hello.html"
    assert not parsed.has_scheme


def test_parse_keeps_colons_in_path():
    parsed = parse_resource_id("string:Hello: world")
    assert parsed.scheme == "string:"
    assert parsed.path == "Hello: world"


def test_prefix_that_is_not_a_scheme_name_is_a_path():
    parsed = parse_resource_id("/tmp/a:b")
    assert parsed.scheme == ""
    assert parsed.path == "/tmp/a:b"

    parsed = parse_resource_id("hello world: x")
    assert parsed.scheme == ""


def test_scheme_is_case_sensitive_as_written():
    assert parse_resource_id("ClassPath:x").scheme == "ClassPath:"


def test_malformed_identifier():
    with pytest.raises(MalformedSchemeError):
        parse_resource_id(":foo")


def test_path_may_start_with_separator():
    parsed = parse_resource_id("string::-) hi")
    assert parsed.scheme == "string:"
    assert parsed.path == ":-) hi"


@pytest.mark.parametrize("scheme", ["", "file:", "classpath:"])
def test_valid_schemes(scheme):
    assert validate_scheme(scheme) == scheme


@pytest.mark.parametrize("scheme", ["file", "a:b:", "::", ":", "class path:"])
def test_invalid_schemes(scheme):
    with pytest.raises(MalformedSchemeError):
        validate_scheme(scheme)
