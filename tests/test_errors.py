import pytest

from tda.errors import (
    DuplicateError,
    EmptyError,
    FullError,
    NotFoundError,
    TDAError,
)


@pytest.mark.parametrize(
    "error_class", [DuplicateError, NotFoundError, EmptyError, FullError]
)
def test_every_error_is_caught_as_tda_error(error_class):
    error = error_class("boom")
    assert str(error) == "boom"
    assert isinstance(error, TDAError)


def test_duplicate_error_keeps_message():
    error = DuplicateError("already there")
    assert error.args == ("already there",)
    assert isinstance(error, TDAError)


def test_not_found_is_a_lookup_error():
    error = NotFoundError("missing")
    assert error.args == ("missing",)
    assert isinstance(error, LookupError)


def test_empty_is_an_index_error():
    error = EmptyError("nothing here")
    assert error.args == ("nothing here",)
    assert isinstance(error, IndexError)


def test_full_is_not_a_lookup_error():
    error = FullError("no room")
    assert str(error) == "no room"
    assert isinstance(error, LookupError) is False