"""Tests for slug helpers, including property-based checks."""

import pytest
from hypothesis import given, strategies as st

from core.utils.slug import (
    generate_slug,
    sanitize_url_segment,
    slug_matches_game_name,
    slug_to_name,
)


@pytest.mark.parametrize("text, expected", [
    ("Elden Ring", "elden-ring"),
    ("  Counter-Strike: Global Offensive ", "counter-strike-global-offensive"),
    ("Tom Clancy's Rainbow Six® Siege", "tom-clancys-rainbow-six-siege"),
    ("snake_case__name", "snake-case-name"),
    ("--Leading and trailing--", "leading-and-trailing"),
    ("multi   \t space", "multi-space"),
    ("Pokémon Go", "pokmon-go"),
    ("Half\u00a0Life", "half-life"),
    ("Half\u3000Life", "half-life"),
    ("!!!", ""),
    ("", ""),
])
def test_generate_slug_examples(text, expected):
    assert generate_slug(text) == expected


@given(st.text())
def test_generate_slug_is_idempotent(text):
    once = generate_slug(text)
    assert generate_slug(once) == once


@given(st.text())
def test_generate_slug_only_emits_url_safe_characters(text):
    slug = generate_slug(text)
    assert all(c in "abcdefghijklmnopqrstuvwxyz0123456789-" for c in slug)
    assert not slug.startswith("-") and not slug.endswith("-")
    assert "--" not in slug


@given(st.text(min_size=1))
def test_slug_matches_its_own_source_name(name):
    assert slug_matches_game_name(generate_slug(name), name)


def test_slug_matches_game_name_is_case_insensitive_on_slug():
    assert slug_matches_game_name("Elden-Ring", "Elden Ring")
    assert not slug_matches_game_name("elden-ring-2", "Elden Ring")


def test_slug_to_name_capitalizes_words():
    assert slug_to_name("elden-ring") == "Elden Ring"
    assert slug_to_name("counter-strike-2") == "Counter Strike 2"


def test_slug_to_name_is_lossy():
    # Punctuation and original casing can't be recovered
    assert slug_to_name(generate_slug("Tom Clancy's XCOM")) == "Tom Clancys Xcom"


def test_slug_to_name_tolerates_empty_segments():
    assert slug_to_name("a--b") == "A  B"
    assert slug_to_name("") == ""


def test_sanitize_url_segment():
    assert sanitize_url_segment("Hello World!") == "hello-world"
    assert sanitize_url_segment("--a__b--") == "a-b"


def test_unicode_whitespace_in_upstream_names_still_matches():
    assert slug_matches_game_name("half-life", "Half\u00a0Life")
