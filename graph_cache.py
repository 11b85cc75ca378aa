# graph_cache.py
# Persisted (Dictionary, Neighbours) pairs so the graph is not rebuilt on
# every run.
#
# Blob layout:
#   4 bytes  MAGIC
#   1 byte   VERSION
#   rest     UTF-8 JSON {"dict": {"word_len": L, "words": [...]},
#                        "neighbours": {"<id>": [id, ...], ...}}

import json
import os
import time

from dictionary import Dictionary
from errors import DecodeError, DictIOError
from neighbours import Neighbours
from utils import ENCODING, vlog

MAGIC = b"swpd"
VERSION = 1
HEADER_LEN = len(MAGIC) + 1


def _is_id(value):
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def encode(dictionary, neighbours):
    payload = {
        "dict": {"word_len": dictionary.word_len, "words": list(dictionary)},
        "neighbours": {str(k): sorted(v) for k, v in neighbours.items()},
    }
    body = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return MAGIC + bytes([VERSION]) + body.encode(ENCODING)


def decode(blob):
    """Parse a blob produced by ``encode``. Header is checked before the payload."""
    if len(blob) < HEADER_LEN:
        raise DecodeError(f"Blob too short: {len(blob)} bytes")
    magic, version = blob[: len(MAGIC)], blob[len(MAGIC)]
    if magic != MAGIC:
        raise DecodeError(f"Bad magic {magic!r}, expected {MAGIC!r}")
    if version != VERSION:
        raise DecodeError(f"Unsupported version {version}, expected {VERSION}")

    try:
        payload = json.loads(blob[HEADER_LEN:].decode(ENCODING))
        raw_dict = payload["dict"]
        raw_neighbours = payload["neighbours"]
        word_len = raw_dict["word_len"]
        words = raw_dict["words"]
        raw_edges = list(raw_neighbours.items())
    except (UnicodeDecodeError, ValueError, KeyError, TypeError, AttributeError) as e:
        raise DecodeError("Can not decode data") from e

    if not _is_id(word_len):
        raise DecodeError(f"Bad word length {word_len!r}")
    if not isinstance(words, list) or not words:
        raise DecodeError("Dict section holds no words")
    if any(not isinstance(w, str) or len(w) != word_len for w in words):
        raise DecodeError(f"Dict section does not hold words of length {word_len}")

    n = len(words)
    edges = {}
    for k, v in raw_edges:
        if not k.isdecimal() or str(int(k)) != k or not isinstance(v, list) or not all(map(_is_id, v)):
            raise DecodeError(f"Neighbours entry {k!r} is not an id with a list of ids")
        wi = int(k)
        if wi >= n or any(i >= n or i == wi for i in v):
            raise DecodeError(f"Neighbours of id {wi} reference ids outside 0..{n} or itself")
        edges[wi] = set(v)
    for wi, ids in edges.items():
        for i in ids:
            if wi not in edges.get(i, ()):
                raise DecodeError(f"Neighbours are not symmetric: {wi} -> {i} has no reverse edge")

    return Dictionary(words, word_len), Neighbours(edges)


def to_file(path, dictionary, neighbours):
    t0 = time.time()
    blob = encode(dictionary, neighbours)
    try:
        with open(path, "wb") as f:
            f.write(blob)
    except OSError as e:
        raise DictIOError(f"Can not write to file '{path}'", path=path) from e
    vlog(f"Graph saved to '{path}' ({len(blob)} bytes)", t0)


def from_file(path):
    t0 = time.time()
    try:
        with open(path, "rb") as f:
            blob = f.read()
    except OSError as e:
        raise DictIOError(f"Can not read from file '{path}'", path=path) from e
    try:
        result = decode(blob)
    except DecodeError as e:
        raise DecodeError(f"Can not decode data from file '{path}'") from e
    vlog(f"Graph loaded from '{path}' ({len(result[0])} words)", t0)
    return result


def load_or_build(load_dictionary, path):
    """
    Return the pair cached at ``path``, or build it from ``load_dictionary()``
    and write it there.
    """
    if os.path.exists(path):
        return from_file(path)
    dictionary = load_dictionary()
    neighbours = Neighbours.from_dictionary(dictionary)
    to_file(path, dictionary, neighbours)
    return dictionary, neighbours
