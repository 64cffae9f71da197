"""Tests for the nid validator."""
from __future__ import annotations

import nid
from nid import WITH_AAO


def test_accepts_empty_string() -> None:
    assert nid.possible("") is True
    assert WITH_AAO.possible("") is True


def test_accepts_plain_nids() -> None:
    assert nid.possible("lets-dance")
    assert nid.possible("kale8790")
    assert nid.possible("a-b-c-1-2-3")


def test_rejects_double_dash() -> None:
    assert not nid.possible("a--b")
    assert not nid.possible("--")
    assert not WITH_AAO.possible("å--ö")


def test_rejects_upper_case() -> None:
    assert not nid.possible("FOO")
    assert not WITH_AAO.possible("Räksmörgås")


def test_rejects_non_letters() -> None:
    assert not nid.possible("foo bar")
    assert not nid.possible("foo/bar")
    assert not nid.possible("foo\n")
    assert not nid.possible("foo_bar")


def test_rejects_diacritics() -> None:
    assert not nid.possible("dürén-ibrahimović")
    assert not WITH_AAO.possible("dürén-ibrahimović")


def test_aao_depends_on_policy() -> None:
    assert WITH_AAO.possible("räksmörgås")
    assert not nid.possible("räksmörgås")
