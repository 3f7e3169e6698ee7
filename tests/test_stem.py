"""Tests for the nltk-backed stemmers."""
import pytest

from textcorpus import InvalidArgument
from textcorpus.stem import available_algorithms, get_stemmer, stem_text


def test_available_algorithms():
    assert available_algorithms() == ["lancaster", "porter"]


def test_default_is_porter():
    assert get_stemmer() is get_stemmer("porter")


def test_names_are_case_insensitive():
    assert get_stemmer("Lancaster") is get_stemmer("lancaster")


def test_unknown_algorithm():
    with pytest.raises(InvalidArgument):
        get_stemmer("snowball")


def test_stem_text_per_word():
    assert stem_text("running cats, jumping") == "run cat, jump"


def test_porter_and_lancaster_differ():
    assert stem_text("maximum") == "maximum"
    assert stem_text("maximum", "lancaster") == "maxim"
