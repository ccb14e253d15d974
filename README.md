# hashserve

`hashserve` hashes streams of newline-delimited records with MD5. Data can
be fed in pieces of any size. For each complete record, the digest is
returned as 32 lower-case hexadecimal characters followed by a newline. The
digest covers the record without its newline.

## Installation

```
pip install .
```

## Hashing a stream

```python
from hashserve.stream import HasherStream

hasher = HasherStream()
hasher.feed(b"hel")             # [] - nothing complete yet
hasher.feed(b"lo\nworld\n")
# [b'5d41402abc4b2a76b9719d911017c592\n',
#  b'7d793037a0760186574b0282f2f435e7\n']
```

`HasherStream.feed(data)` consumes the bytes and returns a list with one
formatted digest for each record completed by this call. A trailing partial
record is carried over to the next call.

`HasherStream.work(queue, write)` takes one buffer from a `BufferQueue`,
feeds it and passes each resulting digest to the `write` callable.

The module also provides:

- `hexencode(digest)`: the digest bytes as lower-case ASCII hex.
- `format_digest(digest)`: the hex digest followed by `b"\n"`.

## Buffers and queue

`hashserve.buffers` provides:

- `make_buffer(size)`: a zero-filled `bytearray` of `size` bytes. A size of
  zero or less raises `ValueError`.
- `BufferQueue`: a thread-safe FIFO. `enqueue(buf)` appends a buffer and
  wakes one waiting consumer. `dequeue()` removes and returns the oldest
  buffer and blocks while the queue is empty. `len(queue)` gives the number of
  waiting buffers.

## Settings from the environment

`hashserve.config.Configuration.from_env(environ=None)` reads these
variables from `environ`, or from `os.environ` if none is given. Each one is
optional, and an unset variable leaves its field as `None`:

| Variable                     | Field                     | Valid values  |
|------------------------------|---------------------------|---------------|
| `HASHER_SERVER_PORT`         | `port`                    | at least 1024 |
| `HASHER_SERVER_SOCK_LISTEN`  | `socket_listen_capacity`  | at least 1    |
| `HASHER_SERVER_ADDRESS`      | `addr`                    | any string    |
| `HASHER_SERVER_CONN_CAP`     | `conn_pool_capacity`      | 1 to 256      |
| `HASHER_SERVER_COMPUTE_CAP`  | `compute_pool_capacity`   | 1 to 256      |

An integer value is read from its leading digits. An optional sign and
leading whitespace are allowed, and trailing text is ignored. The value must
fit in a 32-bit signed integer. Each accepted integer is printed as
`NAME = value`. If a value cannot be parsed or is out of range,
`ConfigurationError` (a `RuntimeError`) is raised with a message of the form
`configuration: NAME : value : reason`.

```python
from hashserve.config import Configuration

config = Configuration.from_env({"HASHER_SERVER_PORT": "9000"})
config.port        # 9000
config.addr        # None
```

The helpers `convert_int(name, value, validate)`,
`validate_greater(value, min_value)` and
`validate_range(value, min_value, max_value)` can also be used on their own.
The two validators raise `ValueError`.

## What this package does not do

This package has no network server and installs no command. It does not
accept connections or send digests back over a socket. It provides the
hashing, queueing and configuration pieces, and you wire them into your own
I/O code.