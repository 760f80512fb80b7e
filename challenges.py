#!/usr/bin/env python3

# standard library modules
import cProfile
import inspect
import logging
import os
import pprint as pprint_module
import re
import sys
import traceback
import warnings

from argparse import ArgumentParser
from contextlib import redirect_stdout
from heapq import nlargest


# modules in this project
import english
import repeating_xor
import util


warnings.simplefilter("default", BytesWarning)
warnings.simplefilter("default", ResourceWarning)
warnings.simplefilter("default", DeprecationWarning)


def pprint(*args, width=120, **kwargs):
    pprint_module.pprint(*args, width=width, **kwargs)


def challenge1():
    """Convert hex to base64"""
    encoded_text = ("49276d206b696c6c696e6720796f757220627261696e206c696b65206120706f6973"
                    "6f6e6f7573206d757368726f6f6d")
    print(util.hex_to_bytes(encoded_text).decode())
    result = util.hex_to_base64(encoded_text)

    assert result == "SSdtIGtpbGxpbmcgeW91ciBicmFpbiBsaWtlIGEgcG9pc29ub3VzIG11c2hyb29t"


def challenge2():
    """Fixed XOR"""
    output = util.xor_bytes(
        util.hex_to_bytes("1c0111001f010100061a024b53535009181c"),
        util.hex_to_bytes("686974207468652062756c6c277320657965"))
    assert output == b"the kid don't play"
    print(output.decode())
    print(output.hex())


def challenge3():
    """Single-byte XOR cipher"""
    cipher_hex = "1b37373331363f78151b7f2b783431333d78397828372d363c78373e783a393b3736"
    ciphertext = util.hex_to_bytes(cipher_hex)
    score_data = (english.xor_score_data(ciphertext, i) for i in range(256))
    best_data = nlargest(5, (d for d in score_data if d is not None),
                         key=lambda x: x["score"])
    pprint(best_data)
    best = english.best_byte_xor_score_data(ciphertext)
    print(best["message"])
    assert best["message"] == "Cooking MC's like a pound of bacon"


def challenge4(text_dir):
    """Detect single-character XOR"""
    with open(os.path.join(text_dir, "4.txt")) as f:
        ciphertexts = [util.hex_to_bytes(line) for line in f if line.strip()]
    result = english.detect_single_byte_xor(c for c in ciphertexts if c is not None)
    pprint(result)
    assert result is not None
    print(result["message"])


def challenge5():
    """Implement repeating-key XOR"""
    stanza = ("Burning 'em, if you ain't quick and nimble\n"
              "I go crazy when I hear a cymbal")
    result = util.apply_repeating_xor_key(stanza.encode(), b"ICE").hex()
    assert result == ("0b3637272a2b2e63622c2e69692a23693a2a3c6324202d623d63343c2a26226324"
                      "272765272a282b2f20430a652e2c652a3124333a653e2b2027630c692b20283165"
                      "286326302e27282f")
    print(result)


def challenge6(text_dir):
    """Break repeating-key XOR"""
    assert util.bit_hamming_distance(b"this is a test", b"wokka wokka!!!") == 37

    with open(os.path.join(text_dir, "6.txt")) as f:
        ciphertext = util.base64_to_bytes(f.read())
    assert ciphertext is not None, "6.txt is not valid base64"

    best_distances = sorted(repeating_xor.keysize_distances(ciphertext), key=lambda x: x[1])
    pprint(best_distances[:5])
    key = repeating_xor.crack_repeating_xor_key(ciphertext)
    assert key is not None
    plaintext = util.bytes_to_text(util.apply_repeating_xor_key(ciphertext, key))
    assert plaintext is not None
    print("key: {!r}".format(key))
    print()
    print(plaintext)


class ChallengeNotFoundError(ValueError):
    pass


def get_challenges(challenge_nums):
    result = []
    for num in challenge_nums:
        fn = globals().get("challenge" + str(num))
        if not callable(fn):
            raise ChallengeNotFoundError("challenge {} not found".format(num))
        result.append(fn)
    return result


def get_all_challenges():
    challenges = {}
    for name, var in globals().items():
        try:
            num = int(re.findall(r"^challenge(\d+)$", name)[0])
        except IndexError:
            pass
        else:
            if callable(var):
                challenges[num] = var
    return [challenges[num] for num in sorted(challenges)]


def main(argv=None):
    parser = ArgumentParser(description="Solve the Cryptopals XOR challenges.")
    parser.add_argument(
        "challenges", nargs="*",
        help="Challenge(s) to run. If not specified, all challenges will be run.")
    parser.add_argument(
        "-p", "--profile", help="Profile challenges.", action="store_true")
    parser.add_argument(
        "-q", "--quiet", help="Don't show challenge output.", action="store_true")
    parser.add_argument(
        "-v", "--verbose", help="Log debugging information.", action="store_true")
    parser.add_argument(
        "-t", "--text-dir", default="text_files",
        help="Directory containing the challenge text files (default: %(default)s).")
    args = parser.parse_args(argv)
    try:
        challenges = get_challenges(args.challenges) or get_all_challenges()
    except ChallengeNotFoundError as e:
        parser.error(e)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    failures = 0
    profile = cProfile.Profile() if args.profile else None
    try:
        with open(os.devnull, "w") as null_stream:
            output_stream = null_stream if args.quiet else sys.stdout
            for challenge in challenges:
                num = re.findall(r"^challenge(.+)$", challenge.__name__)[0]
                print("Running challenge {}: {}".format(num, challenge.__doc__))
                try:
                    challenge_args = {name: value for name, value in vars(args).items()
                                      if name in inspect.signature(challenge).parameters}
                    with redirect_stdout(output_stream):
                        if profile:
                            profile.runcall(challenge, **challenge_args)
                        else:
                            challenge(**challenge_args)
                except Exception:
                    failures += 1
                    traceback.print_exc()
                else:
                    print("Challenge {} passed.".format(num))
    finally:
        if profile:
            print()
            profile.print_stats(sort="cumulative")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
