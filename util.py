import base64

from itertools import cycle, tee

from Cryptodome.Util.strxor import strxor, strxor_c


def xor_bytes(bytes1, bytes2):
    """XOR two byte strings, cycling the shorter one over the longer one."""
    if not bytes1 or not bytes2:
        raise ValueError("inputs must not be empty")
    if len(bytes1) < len(bytes2):
        bytes1, bytes2 = bytes2, bytes1
    return apply_repeating_xor_key(bytes1, bytes2)


def apply_repeating_xor_key(input_bytes, key):
    if not key:
        raise ValueError("key must not be empty")
    input_bytes = bytes(input_bytes)
    if not input_bytes:
        return b""
    if len(key) == 1:
        return strxor_c(input_bytes, key[0])
    if len(key) == len(input_bytes):
        return strxor(input_bytes, bytes(key))
    return bytes(a ^ b for a, b in zip(input_bytes, cycle(key)))


def bit_hamming_distance(bytes1, bytes2):
    if len(bytes1) != len(bytes2):
        raise ValueError("inputs must be of equal length")
    return sum(bin(b1 ^ b2).count("1") for b1, b2 in zip(bytes1, bytes2))


def chunks(x, chunk_size=16):
    if chunk_size < 1:
        raise ValueError("chunk size must be positive")
    return [x[i : i + chunk_size] for i in range(0, len(x), chunk_size)]


def sliding_pairs(iterable):
    # pairwise recipe from https://docs.python.org/3/library/itertools.html
    """s -> (s[0], s[1]), (s[1], s[2]), (s[2], s[3]), ..."""
    a, b = tee(iterable)
    next(b, None)
    return zip(a, b)


def shortest_period(x):
    """Return the shortest prefix of x that x is a whole repetition of.

    shortest_period(b"ICEICEICE") == b"ICE"
    """
    length = len(x)
    for size in range(1, length):
        if length % size == 0 and x[:size] * (length // size) == x:
            return x[:size]
    return x


def bytes_to_text(b):
    try:
        return bytes(b).decode("utf-8")
    except UnicodeDecodeError:
        return None


def hex_to_bytes(hex_string):
    try:
        return bytes.fromhex(hex_string.strip())
    except ValueError:
        return None


def base64_to_bytes(base64_text):
    # Input may span several lines, as in the challenge text files.
    joined = "".join(base64_text.split())
    try:
        return base64.b64decode(joined, validate=True)
    except ValueError:
        return None


def hex_to_base64(hex_string):
    raw = hex_to_bytes(hex_string)
    if raw is None:
        return None
    return base64.b64encode(raw).decode()
