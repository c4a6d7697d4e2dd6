"""Unit tests for clientkit.utils.validations."""

import asyncio
import datetime
import re

import pytest

from clientkit.utils import validations as v

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize("name", ["abc", "first_name", "a.b-c_d", "Z9z"])
def test_valid_prop_names(name):
    """Letter first, alphanumeric last, at least three characters."""
    assert v.is_valid_prop_name(name)


@pytest.mark.parametrize("name", ["ab", "1abc", "abc-", "a b c", "", None, 123])
def test_invalid_prop_names(name):
    """Anything else fails, non-strings included."""
    assert not v.is_valid_prop_name(name)


def test_is_awaitable():
    """Coroutines are awaitable; plain functions and values are not."""

    async def work():
        return 1

    coro = work()
    try:
        assert v.is_awaitable(coro)
    finally:
        coro.close()
    assert not v.is_awaitable(work)
    assert not v.is_awaitable(asyncio)
    assert not v.is_awaitable(None)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ({}, True),
        ({"a": 1}, True),
        ([], False),
        (None, False),
        ("{}", False),
        (datetime.date(2020, 1, 1), False),
        (type("Sub", (dict,), {})(), False),
    ],
)
def test_is_plain_obj(value, expected):
    """Only exact dict instances are plain objects."""
    assert v.is_plain_obj(value) is expected


def test_is_not_nil():
    """Only None is nil."""
    assert not v.is_not_nil(None)
    for value in (0, "", False, [], {}):
        assert v.is_not_nil(value)


@pytest.mark.parametrize("value", ["", [], {}, (), set()])
def test_empty_containers(value):
    """Empty strings and containers are empty."""
    assert v.is_empty(value)
    assert not v.is_not_empty(value)


@pytest.mark.parametrize("value", [None, 0, False, "x", [0], {"a": None}])
def test_non_empty_values(value):
    """None, numbers, booleans and non-empty containers are not empty."""
    assert not v.is_empty(value)
    assert v.is_not_empty(value)


@pytest.mark.parametrize(
    ("value", "expected"),
    [("", True), ("   ", True), ("\n\t", True), ("x", False), (None, False), (0, False), ([], False)],
)
def test_is_blank_string(value, expected):
    """Only whitespace-only strings are blank strings."""
    assert v.is_blank_string(value) is expected
    assert v.is_not_blank_string(value) is not expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("text", True),
        (0, True),
        (3.5, True),
        ("  ", False),
        ("", False),
        (True, False),
        (None, False),
        ([], False),
    ],
)
def test_is_stringish(value, expected):
    """Non-blank strings and non-boolean numbers are stringish."""
    assert v.is_stringish(value) is expected


@pytest.mark.parametrize(
    "value",
    [True, 1, 1.5, "s", re.compile("x"), datetime.date(2020, 1, 1), datetime.datetime(2020, 1, 1)],
)
def test_primitiveish_values(value):
    """Booleans, numbers, strings, regexes and dates are primitive-ish."""
    assert v.is_primitiveish(value)


@pytest.mark.parametrize("value", [None, [], {}, object()])
def test_non_primitiveish_values(value):
    """Containers, None and arbitrary objects are not."""
    assert not v.is_primitiveish(value)


def test_has_nested_prop():
    """A non-None value at the path means the prop exists."""
    obj = {"response": {"data": {"status": 0, "detail": None}}}
    assert v.has_nested_prop(("response", "data", "status"), obj)
    assert not v.has_nested_prop(("response", "data", "detail"), obj)
    assert not v.has_nested_prop(("response", "headers"), obj)
    assert not v.has_nested_prop(("a",), None)


@pytest.mark.parametrize("email", ["user@example.com", "first.last@mail.example.org", "user@localhost"])
def test_valid_emails(email):
    """Ordinary addresses pass."""
    assert v.is_valid_email(email)


@pytest.mark.parametrize(
    "email",
    ["", "user", "user@@example.com", ".user@example.com", "user@.com", "us er@example.com", None],
)
def test_invalid_emails(email):
    """Malformed addresses fail."""
    assert not v.is_valid_email(email)


@pytest.mark.parametrize("password", ["abcdefg", "Abcdef1", "p@ssw0rd!", "a" + "b" * 50])
def test_valid_passwords(password):
    """7 to 51 characters starting with a letter."""
    assert v.is_valid_password(password)


@pytest.mark.parametrize("password", ["abcdef", "1abcdefg", "a" + "b" * 51, "abc defg", None])
def test_invalid_passwords(password):
    """Too short, too long, digit first, or containing spaces."""
    assert not v.is_valid_password(password)


@pytest.mark.parametrize("level", ["debug", "TRACE", " info ", "Warn", "error", "fatal"])
def test_valid_log_levels(level):
    """Level names are matched trimmed and case-insensitively."""
    assert v.is_valid_log_level(level)


@pytest.mark.parametrize("level", ["warning", "critical", "", "verbose", None, 10])
def test_invalid_log_levels(level):
    """Anything outside the six names fails."""
    assert not v.is_valid_log_level(level)


@pytest.mark.parametrize(
    "url",
    [
        "photo.jpg",
        "https://cdn.example.com/img/a.PNG",
        "/static/logo.svg",
        "scan.tiff",
        "data:image/png;base64,iVBORw0KGgo=",
    ],
)
def test_image_urls(url):
    """Image extensions and base64 image data URIs pass."""
    assert v.is_image_url(url)


@pytest.mark.parametrize("url", ["notes.txt", "my photo.jpg", "photo.jpg ", "data:text/plain;base64,aGk=", None])
def test_non_image_urls(url):
    """Other extensions, whitespace and non-image data URIs fail."""
    assert not v.is_image_url(url)
