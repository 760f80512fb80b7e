import pytest

import english
import util

COOKING_HEX = "1b37373331363f78151b7f2b783431333d78397828372d363c78373e783a393b3736"

# Every key turns one of 0x00 and 0x80 into a lone byte >= 0x80, which is
# never valid UTF-8.
UNDECODABLE = b"\x00\x80" * 15


def test_is_printable():
    assert english.is_printable("Cooking MC's like a pound of bacon\n")
    assert english.is_printable("café")
    assert not english.is_printable("bacon\x00")
    assert not english.is_printable("\x07")


def test_non_printable_text_scores_zero():
    assert english.english_like_score("\x00\x01\x02") == 0.0
    assert english.english_like_score("almost english\x7f") == 0.0
    assert english.english_like_score("") == 0.0


def test_separator_controls_are_not_whitespace():
    assert not english.is_printable("\x1c\x1d\x1e\x1f")
    assert english.english_like_score("\x1c\x1d\x1e\x1f") == 0.0
    assert english.english_like_score("bacon\x1e") == 0.0
    assert english.is_printable(" \t\r\n\x0b\x0c")


def test_score_combines_observed_and_expected_frequencies():
    # Each "e" is half the text and has an expected frequency of 0.111607.
    assert english.english_like_score("ee") == pytest.approx(1.111607)
    # Counting is case-sensitive but the expected frequency lookup isn't.
    assert english.english_like_score("Ee") == pytest.approx(0.611607)
    assert english.english_like_score("zz") == pytest.approx(1.0)


def test_printable_text_outscores_garbage():
    assert english.english_like_score("the rain in spain") > english.english_like_score("\x01")


def test_xor_score_data():
    data = english.xor_score_data(b"\x01\x02", 0x60)
    assert data["key"] == 0x60
    assert data["message"] == "ab"
    assert english.xor_score_data(b"\x80", 0) is None


def test_crack_cooking_mcs():
    best = english.best_byte_xor_score_data(util.hex_to_bytes(COOKING_HEX))
    assert best["key"] == 88
    assert best["message"] == "Cooking MC's like a pound of bacon"
    assert best["score"] > 0.0


def test_crack_breaks_ties_with_lowest_key():
    # "E" and "e" score exactly the same, and "E" comes from the lower key.
    best = english.best_byte_xor_score_data(b"\x00")
    assert best["key"] == ord("E")
    assert best["message"] == "E"


def test_crack_gives_none_without_decodable_candidates():
    assert english.best_byte_xor_score_data(UNDECODABLE) is None
    assert english.best_byte_xor_score_data(b"") is None


def test_detect_single_byte_xor():
    ciphertexts = [UNDECODABLE, util.hex_to_bytes(COOKING_HEX), b"\x00" * 10]
    result = english.detect_single_byte_xor(ciphertexts)
    assert result["index"] == 1
    assert result["key"] == 88
    assert result["message"] == "Cooking MC's like a pound of bacon"


def test_detect_single_byte_xor_threshold():
    ciphertexts = [util.hex_to_bytes(COOKING_HEX)]
    assert english.detect_single_byte_xor(ciphertexts, threshold=1000.0) is None
    assert english.detect_single_byte_xor([UNDECODABLE]) is None
