from __future__ import annotations

import io

import pytest

from resweave.detect import DEFAULT_DETECTORS, ExtensionDetector, NamespaceDetector, detect_engine
from resweave.errors import EngineDetectionError
from resweave.resource import Resource

THYMELEAF_HTML = b"""<!DOCTYPE html>
<html xmlns:th="http://www.thymeleaf.org">
<body><p th:text="${name}">x</p></body>
</html>
"""


def _resource(data: bytes) -> Resource:
    return Resource.from_bytes("mem", "mem", data)


def test_extension_detector():
    detector = ExtensionDetector()
    assert detector.can_parse("mail/hello.ftl")
    assert not detector.can_parse("mail/hello.html")
    assert ExtensionDetector(".ftl", ".ftlh").can_parse("hello.ftlh")


def test_namespace_detector():
    detector = NamespaceDetector()
    assert detector.can_parse("hello.html", _resource(THYMELEAF_HTML))
    assert not detector.can_parse("hello.html", _resource(b"<html><body/></html>"))
    assert not detector.can_parse("hello.html", None)


def test_namespace_detector_read_failure():
    def broken():
        raise OSError("disk on fire")

    with pytest.raises(EngineDetectionError):
        NamespaceDetector().can_parse("x.html", Resource("x", "x", broken))


def test_detect_engine_order():
    assert detect_engine("hello.ftl", _resource(b"Hello ${name}"), DEFAULT_DETECTORS) == "freemarker"
    assert detect_engine("hello.html", _resource(THYMELEAF_HTML), DEFAULT_DETECTORS) == "thymeleaf"
    pairs = [("first", ExtensionDetector(".html")), ("second", NamespaceDetector())]
    assert detect_engine("hello.html", _resource(THYMELEAF_HTML), pairs) == "first"


def test_detect_engine_none_matches():
    with pytest.raises(EngineDetectionError):
        detect_engine("hello.txt", _resource(b"plain"), DEFAULT_DETECTORS)


def test_bytesio_opener_is_fresh_per_open():
    res = _resource(THYMELEAF_HTML)
    assert isinstance(res.open(), io.BytesIO)
    assert NamespaceDetector().can_parse("a", res)
    assert NamespaceDetector().can_parse("a", res)
