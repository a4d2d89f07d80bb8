# bvernam

`bvernam` encrypts data with a block-shifted Vernam cipher. Each input byte
is XORed with one byte of the key. The input is split into blocks that are
as long as the key. Each new block starts one byte further along the key:
block 0 starts at key byte 0, block 1 at key byte 1, and so on, wrapping
around. Input byte `i` therefore meets key byte
`(i + i // len(key)) % len(key)`.

XOR undoes itself. Running the cipher a second time with the same key
gives back the original data.

## Installation

```
pip install .
```

To install with the test tools (pytest, hypothesis):

```
pip install .[test]
```

## Command line

```
bvernam KEY_FILE INPUT_FILE OUTPUT_FILE
```

The command reads `KEY_FILE` and `INPUT_FILE` and writes the encrypted bytes
to `OUTPUT_FILE`. It always creates or truncates `OUTPUT_FILE`. If the key or
the input is empty, there is nothing to encrypt and the output file is left
empty.

It expects exactly three arguments. With any other number it prints
`Error: Incorrect number of parameters!` to standard error and exits with
status 1. If a file cannot be opened, read or written, it prints the reason
to standard error and exits with status 1. On success it exits with status 0.

To decrypt, run the same command with the encrypted file as the input:

```
bvernam secret.key message.txt message.enc
bvernam secret.key message.enc message.txt
```

## Library

```python
from bvernam.cipher import encrypt, encrypt_file, BVernamError

key = b"placeholder"
ciphertext = encrypt(b"attack at dawn", key)
assert encrypt(ciphertext, key) == b"attack at dawn"

encrypt_file("secret.key", "message.txt", "message.enc")
```

The `bvernam.cipher` module provides the following:

- `key_index(position, key_length)` returns the index of the key byte used
  for the input byte at `position`. It raises `ValueError` if `key_length`
  is not positive or `position` is negative.
- `key_stream(key)` yields key bytes in the order they are applied. For a
  non-empty key the stream never ends. For an empty key it yields nothing.
- `encrypt(data, key)` encrypts or decrypts a byte string. With an empty key
  it returns `b""`.
- `encrypt_stream(source, key, sink, chunk_size=65536)` reads from one binary
  file object, encrypts the data, and writes it to another, one chunk at a
  time. It returns the number of bytes written. With an empty key nothing is
  read or written. A `chunk_size` that is not positive raises `ValueError`.
- `encrypt_file(key_path, input_path, output_path)` encrypts one file into
  another and returns the number of bytes written.

When a key, input or output file cannot be used, the library raises
`BVernamError`.

The command itself lives in `bvernam.cli.main(argv=None)`. It returns the
exit status and does not exit the process.

## What it does not do

`bvernam` only applies the XOR transformation:

- It does not generate keys.
- It does not authenticate or check the integrity of the data.
- It does not warn you when the key is shorter than the input and is
  therefore reused.