import logging

from english import best_byte_xor_score_data
from util import (apply_repeating_xor_key, bit_hamming_distance, bytes_to_text, chunks,
                  shortest_period, sliding_pairs)

logger = logging.getLogger(__name__)

# Range of key sizes tried when the key size is not known, inclusive.
MIN_KEYSIZE = 2
MAX_KEYSIZE = 39


def keysize_distances(ciphertext, min_keysize=MIN_KEYSIZE, max_keysize=MAX_KEYSIZE):
    """Return (key size, average normalized Hamming distance) pairs.

    For each key size, the ciphertext is cut into blocks of that size, and the
    Hamming distance between each block and the next one is divided by the
    key size. A trailing partial block is left out. Key sizes that don't give
    at least two full blocks are skipped.
    """
    result = []
    for keysize in range(min_keysize, max_keysize + 1):
        blocks = [c for c in chunks(ciphertext, keysize) if len(c) == keysize]
        distances = [bit_hamming_distance(b1, b2) / keysize
                     for b1, b2 in sliding_pairs(blocks)]
        if distances:
            result.append((keysize, sum(distances) / len(distances)))
    return result


def estimate_keysize(ciphertext, min_keysize=MIN_KEYSIZE, max_keysize=MAX_KEYSIZE):
    # Multiples of the real key size tend to score about as well as the real
    # one, so the result may be one of those.
    best_keysize, best_distance = None, None
    for keysize, distance in keysize_distances(ciphertext, min_keysize, max_keysize):
        if best_distance is None or distance < best_distance:
            best_keysize, best_distance = keysize, distance
    logger.debug("estimated key size %s (distance %s)", best_keysize, best_distance)
    return best_keysize


def transposed_blocks(ciphertext, keysize):
    """Return the bytes at each position modulo keysize, one block per position.

    transposed_blocks(b"abcdefg", 3) == [b"adg", b"be", b"cf"]
    """
    blocks = chunks(ciphertext, keysize)
    return [bytes(block[i] for block in blocks if i < len(block)) for i in range(keysize)]


def crack_repeating_xor_key(ciphertext, keysize=None):
    if keysize is None:
        keysize = estimate_keysize(ciphertext)
        if keysize is None:
            return None
    key = bytearray()
    for i, block in enumerate(transposed_blocks(ciphertext, keysize)):
        data = best_byte_xor_score_data(block)
        if data is None:
            logger.debug("no single-byte key decrypts column %d of %d", i, keysize)
            return None
        key.append(data["key"])
    key = shortest_period(bytes(key))
    logger.debug("recovered key %r", key)
    return key


def crack_repeating_xor(ciphertext, keysize=None):
    """Decrypt ciphertext encrypted with an unknown repeating XOR key.

    The key size is estimated from the ciphertext unless it is given. Returns
    the plaintext, or None if the key size can't be estimated, some key byte
    can't be found, or the result isn't valid UTF-8.
    """
    key = crack_repeating_xor_key(ciphertext, keysize)
    if key is None:
        return None
    return bytes_to_text(apply_repeating_xor_key(ciphertext, key))
