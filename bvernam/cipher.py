"""Block-rotating Vernam cipher.

The data is split into blocks as long as the key. Block ``b`` is XORed with
the key rotated left by ``b`` positions, so byte ``i`` of the data meets key
byte ``(i + i // len(key)) % len(key)``. XOR makes the operation its own
inverse: encrypting twice with the same key gives back the original data.
"""

from __future__ import annotations

from collections.abc import Iterator
from itertools import count
from os import PathLike
from typing import BinaryIO, Union

__all__ = [
    "BVernamError",
    "key_index",
    "key_stream",
    "encrypt",
    "encrypt_stream",
    "encrypt_file",
]

StrPath = Union[str, "PathLike[str]"]

DEFAULT_CHUNK_SIZE = 64 * 1024


class BVernamError(Exception):
    """Raised when the key, input or output cannot be used."""


def key_index(position: int, key_length: int) -> int:
    """Return the key offset used for the data byte at ``position``."""
    if key_length <= 0:
        raise ValueError("key_length must be positive")
    if position < 0:
        raise ValueError("position must not be negative")
    block = position // key_length
    return (position + block) % key_length


def key_stream(key: bytes) -> Iterator[int]:
    """Yield the key bytes in the order they are applied to the data.

    The stream is endless for a non-empty key and empty for an empty key.
    """
    key = bytes(key)
    length = len(key)
    if not length:
        return
    for block in count():
        shift = block % length
        yield from key[shift:]
        yield from key[:shift]


def encrypt(data: bytes, key: bytes) -> bytes:
    """Encrypt (or decrypt) ``data`` with ``key``.

    An empty key leaves nothing to encrypt and gives an empty result.
    """
    return bytes(b ^ k for b, k in zip(data, key_stream(key)))


def encrypt_stream(
    source: BinaryIO,
    key: bytes,
    sink: BinaryIO,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Encrypt everything read from ``source`` into ``sink``.

    Returns the number of bytes written. With an empty key nothing is read
    or written.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    if not key:
        return 0
    stream = key_stream(key)
    written = 0
    for chunk in iter(lambda: source.read(chunk_size), b""):
        # zip stops on the exhausted chunk before pulling from the key stream
        encrypted = bytes(b ^ k for b, k in zip(chunk, stream))
        try:
            sink.write(encrypted)
        except OSError as exc:
            raise BVernamError(f"cannot write output: {exc}") from exc
        written += len(encrypted)
    return written


def encrypt_file(key_path: StrPath, input_path: StrPath, output_path: StrPath) -> int:
    """Encrypt the file at ``input_path`` with the key file into ``output_path``.

    The output file is always created (and truncated). Returns the number of
    bytes written.
    """
    try:
        with open(key_path, "rb") as key_file:
            key = key_file.read()
    except OSError as exc:
        raise BVernamError(f"cannot read key file: {exc}") from exc
    try:
        source = open(input_path, "rb")
    except OSError as exc:
        raise BVernamError(f"cannot open input file: {exc}") from exc
    with source:
        try:
            sink = open(output_path, "wb")
        except OSError as exc:
            raise BVernamError(f"cannot open output file: {exc}") from exc
        with sink:
            try:
                return encrypt_stream(source, key, sink)
            except OSError as exc:
                raise BVernamError(f"cannot read input file: {exc}") from exc