#!/usr/bin/env python3

from setuptools import setup

setup(
    author="Elias Zamaria",
    description="Break single-byte and repeating-key XOR ciphers.",
    entry_points={"console_scripts": ["xor-challenges = challenges:main"]},
    extras_require={"test": ["pytest >= 7.0"]},
    install_requires="pycryptodomex >= 3.4.2",
    license="MIT",
    name="xor-cryptanalysis",
    py_modules=["challenges", "english", "repeating_xor", "util"],
    python_requires=">=3.6",
    url="https://github.com/mikez302/cryptopals_solutions",
    version="0.1.0",
)
