from __future__ import annotations

from rmcxml.errors import ConfigError, DocumentNotOpenError, ErrorLocation, RmcError


def test_location_renders_available_parts() -> None:
    assert str(ErrorLocation()) == "<unknown>"
    assert str(ErrorLocation(uri="file:///a.xml", line=3)) == "file:///a.xml:3"
    assert str(ErrorLocation(uri="file:///a.xml", line=3, column=7)) == "file:///a.xml:3:7"


def test_format_without_location() -> None:
    assert RmcError("plain").format() == "[rmc-error] plain"


def test_format_with_location_and_hint() -> None:
    error = DocumentNotOpenError("No open document", uri="file:///a.xml", hint="Open it first")
    assert error.format() == "file:///a.xml: [document-not-open] No open document (hint: Open it first)"
    assert error.uri == "file:///a.xml"


def test_explicit_code_overrides_class_code() -> None:
    assert ConfigError("x", code="custom").code == "custom"
    assert ConfigError("x").code == "config-error"
