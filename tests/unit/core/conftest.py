"""Shared fixtures for core unit tests"""

import pytest


CONTRACT_TEXTS = [
    ("", ""),
    ("", "a\nb"),
    ("a\nb", ""),
    ("a\nb\nc", "a\nb\nc"),
    ("a\nb", "a\nx\nb"),
    ("foo\nbar", "foo\nbaz"),
    ("x\ny\nz", "a"),
    ("a\nb\n", "a\nb"),
    ("one\ntwo\nthree\nfour\nfive", "zero\none\n2\nthree\nfive\nsix"),
    ("a\nb\nc\nd\ne\nf", "a\nB\nC\nd\nE\nf\ng"),
    ("\n\n\n", "\n"),
    ("r1\nr2\nr3\nr4\nr5\nr6\nr7\nkeep", "keep\na1"),
]


@pytest.fixture(name="contract_texts", params=CONTRACT_TEXTS, ids=lambda p: f"{p[0]!r}->{p[1]!r}")
def contract_texts_fixture(request):
    """One (original, modified) pair per edit shape; tests using it run once per pair."""
    return request.param
