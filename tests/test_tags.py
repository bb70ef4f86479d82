import pytest

from hatman.tags import (
    contains_prefix,
    contains_suffix,
    get_prefix,
    get_suffix,
    make_tag,
)


def test_prefix_and_suffix_of_tagged_name():
    name = "[script]{level_change}"
    assert get_prefix(name) == "script"
    assert get_suffix(name) == "level_change"


@pytest.mark.parametrize("prefix,suffix", [("layer", "main"), ("", ""), ("entity", "x y")])
def test_make_tag_round_trip(prefix, suffix):
    tag = make_tag(prefix, suffix)
    assert get_prefix(tag) == prefix
    assert get_suffix(tag) == suffix


def test_make_tag_format():
    assert make_tag("music", "1") == "[music]{1}"


def test_untagged_name_is_returned_whole():
    assert get_prefix("background") == "background"
    assert get_suffix("background") == "background"


def test_missing_closing_bracket_takes_rest():
    assert get_prefix("ab[cd") == "cd"


def test_missing_opening_bracket_takes_start():
    assert get_prefix("ab]cd") == "ab"


def test_contains_prefix():
    tag = make_tag("layer", "front")
    assert contains_prefix(tag, "layer")
    assert not contains_prefix(tag, "front")


def test_contains_suffix_looks_in_square_brackets():
    assert contains_suffix("[front]", "front")
    assert not contains_suffix("{front}", "front")