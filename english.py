import logging
import math
import string

from collections import defaultdict

from util import apply_repeating_xor_key, bytes_to_text

logger = logging.getLogger(__name__)

# A decoded line is accepted as the single-byte-XOR one if its best score
# exceeds this.
ACCEPTANCE_THRESHOLD = 0.5

# Relative frequencies of the ten most common letters in English text. Any
# other character contributes nothing to the expected part of the score.
# Text should be converted to lowercase before looking anything up here.
english_letter_frequencies = {
    "e": 0.111607, "a": 0.084966, "r": 0.075809, "i": 0.075448, "o": 0.071635,
    "t": 0.069509, "n": 0.066544, "s": 0.057351, "l": 0.054893, "c": 0.045388,
}

_ascii_punctuation = frozenset(string.punctuation)

# str.isspace accepts the file, group, record and unit separators, which
# aren't Unicode whitespace.
_separators = frozenset("\x1c\x1d\x1e\x1f")


def is_printable(text):
    return all(char.isalnum() or char in _ascii_punctuation
               or (char.isspace() and char not in _separators)
               for char in text)


def english_like_score(text):
    """Return a non-negative score, higher for text that looks more English.

    Text containing anything other than alphanumerics, ASCII punctuation and
    whitespace scores 0.0, the lowest possible score. Otherwise every
    character adds the average of its frequency within the text and its
    expected frequency in English. The score only means something when
    compared against other decodings of the same ciphertext.
    """
    if not text or not is_printable(text):
        return 0.0
    char_counts = defaultdict(int)
    for char in text:
        char_counts[char] += 1
    text_length = len(text)
    result = 0.0
    for char in text:
        observed = char_counts[char] / text_length
        expected = english_letter_frequencies.get(char.lower(), 0.0)
        result += (observed + expected) / 2
    assert math.isfinite(result)
    return result


def xor_score_data(ciphertext, key):
    message = bytes_to_text(apply_repeating_xor_key(ciphertext, bytes([key])))
    if message is None:
        return None
    return {"key": key,
            "score": english_like_score(message),
            "message": message}


def best_byte_xor_score_data(ciphertext):
    """Find the single-byte XOR key that decrypts ciphertext to the most
    English-like text.

    Returns a dict with "key", "score" and "message", or None if no key
    decrypts ciphertext to valid UTF-8. Keys are tried in ascending order and
    a later key only wins with a strictly higher score.
    """
    if not ciphertext:
        return None
    best = None
    for i in range(256):
        data = xor_score_data(ciphertext, i)
        if data is not None and (best is None or data["score"] > best["score"]):
            best = data
    return best


def detect_single_byte_xor(ciphertexts, threshold=ACCEPTANCE_THRESHOLD):
    """Return the best decoding of the first ciphertext that looks like
    single-byte-XOR-encrypted English, along with its index."""
    for i, ciphertext in enumerate(ciphertexts):
        best = best_byte_xor_score_data(ciphertext)
        if best is None:
            continue
        if best["score"] > threshold:
            logger.debug("ciphertext %d decrypts with key %d (score %.4f)",
                         i, best["key"], best["score"])
            return dict(best, index=i)
    return None
