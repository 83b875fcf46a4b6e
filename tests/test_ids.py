# File: tests/test_ids.py
"""
Test IdGenerator: sequential, independent per instance, can skip past used ids.
"""

from rheonet.ids import IdGenerator


def test_sequential_ids():
    ids = IdGenerator()
    assert [ids() for _ in range(3)] == ["n100", "n101", "n102"]


def test_generators_are_independent():
    a = IdGenerator()
    b = IdGenerator()
    a()
    a()
    assert b() == "n100"
    assert a() == "n102"


def test_custom_prefix_and_start():
    ids = IdGenerator(prefix="el", start=1)
    assert ids() == "el1"
    assert ids() == "el2"


def test_reserve_skips_used_suffixes():
    """After loading a saved tree, new ids must not reuse its numbers."""
    ids = IdGenerator()
    ids.reserve(["root", "n100", "n250", "n7", "x999"])
    assert ids() == "n251"


def test_reserve_never_goes_backwards():
    ids = IdGenerator()
    for _ in range(10):
        ids()
    ids.reserve(["n101"])
    assert ids() == "n110"


def test_reserve_without_matches_is_noop():
    ids = IdGenerator()
    ids.reserve(["root", "s1", "arm"])
    assert ids() == "n100"
