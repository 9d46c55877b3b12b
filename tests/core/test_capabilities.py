"""Tests for types.py - capability detection."""

from __future__ import annotations

import functools
from unittest.mock import MagicMock

import pytest

from spectaculous.types import (
    Matcher,
    accepts_argument,
    is_error_kind,
    is_matcher,
    takes_no_arguments,
)


def no_args() -> None:
    pass


def one_arg(target: object) -> None:
    pass


def optional_arg(target: object = None) -> None:
    pass


def two_args(a: object, b: object) -> None:
    pass


def var_args(*args: object) -> None:
    pass


class Checker:
    def __call__(self, target: object) -> bool:
        return True


class EvenMatcher:
    def matches(self, item: object) -> bool:
        return isinstance(item, int) and item % 2 == 0


class TestAcceptsArgument:
    @pytest.mark.parametrize(
        "fn",
        [one_arg, optional_arg, var_args, lambda v: v, Checker(), MagicMock(), functools.partial(two_args, 1)],
    )
    def test_accepts(self, fn) -> None:
        assert accepts_argument(fn)

    @pytest.mark.parametrize("fn", [no_args, lambda: None, two_args, functools.partial(one_arg, 1)])
    def test_rejects(self, fn) -> None:
        assert not accepts_argument(fn)

    def test_bound_method(self) -> None:
        assert accepts_argument(EvenMatcher().matches)


class TestTakesNoArguments:
    @pytest.mark.parametrize("fn", [no_args, optional_arg, var_args, lambda: 1])
    def test_takes_none(self, fn) -> None:
        assert takes_no_arguments(fn)

    @pytest.mark.parametrize("fn", [one_arg, two_args, lambda v: v])
    def test_requires_some(self, fn) -> None:
        assert not takes_no_arguments(fn)


class TestMatcher:
    def test_protocol(self) -> None:
        assert isinstance(EvenMatcher(), Matcher)
        assert not isinstance(one_arg, Matcher)

    def test_is_matcher(self) -> None:
        assert is_matcher(EvenMatcher())
        assert is_matcher(MagicMock(spec=["matches"]))
        assert not is_matcher(EvenMatcher)
        assert not is_matcher(one_arg)
        assert not is_matcher(3)


class TestIsErrorKind:
    @pytest.mark.parametrize("kind", [ValueError, KeyboardInterrupt, (KeyError, ValueError)])
    def test_error_kinds(self, kind) -> None:
        assert is_error_kind(kind)

    @pytest.mark.parametrize("kind", [ValueError(), "ValueError", object, (), (ValueError, 1)])
    def test_not_error_kinds(self, kind) -> None:
        assert not is_error_kind(kind)
