# dictionary.py
# Word list with fixed word length. Word ids are line positions.

import time
from typing import Dict, Iterable, Iterator, Optional, Tuple

import requests

import utils
from errors import DictIOError, FormatError, WordNotFoundError
from utils import DEFAULT_TIMEOUT, ENCODING, vlog
from wordlist import DEFAULT_WORDS


class Dictionary:
    """
    Immutable ordered list of words sharing one length.

      - Dictionary.create(text) / create_from_file(path) / create_from_url(url)
      - Dictionary.create_default() -> bundled list, built once per process
      - word_len, len(d), d[i] / d.get(i), iteration in id order
    Lengths are counted in characters, not bytes. Duplicate lines are kept
    and each gets its own id.
    """

    __slots__ = ("_words", "_word_len")

    _default = None

    def __init__(self, words: Iterable[str], word_len: int):
        self._words: Tuple[str, ...] = tuple(words)
        self._word_len = word_len

    # ---------- Constructors ----------
    @classmethod
    def create(cls, text: str) -> "Dictionary":
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        lines = [line[:-1] if line.endswith("\r") else line for line in lines]
        if not lines:
            raise FormatError("Empty word list")
        word_len = len(lines[0])
        for word in lines:
            if len(word) != word_len:
                raise FormatError(
                    f"Word length mismatch: expected {word_len}, found {len(word)} in word '{word}'"
                )
        return cls(lines, word_len)

    @classmethod
    def create_from_file(cls, path) -> "Dictionary":
        t0 = time.time()
        try:
            with open(path, "r", encoding=ENCODING) as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DictIOError(f"Failed to read file '{path}'", path=path) from e
        try:
            dictionary = cls.create(text)
        except FormatError as e:
            raise FormatError(f"Can not create dict from file '{path}'") from e
        vlog(f"Dictionary loaded from '{path}' ({len(dictionary)} words)", t0)
        return dictionary

    @classmethod
    def create_from_url(cls, url: str, timeout=DEFAULT_TIMEOUT) -> "Dictionary":
        t0 = time.time()
        utils.log_with_time(f"⟳ Downloading dictionary from {url}…")
        try:
            resp = requests.get(url, timeout=timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise DictIOError(f"Failed to download '{url}'", path=url) from e
        resp.encoding = ENCODING
        try:
            dictionary = cls.create(resp.text)
        except FormatError as e:
            raise FormatError(f"Can not create dict from '{url}'") from e
        vlog(f"Dictionary downloaded ({len(dictionary)} words)", t0)
        return dictionary

    @classmethod
    def create_default(cls) -> "Dictionary":
        if cls._default is None:
            try:
                cls._default = cls.create(DEFAULT_WORDS)
            except FormatError as e:
                raise FormatError("Can not create default dict") from e
        return cls._default

    # ---------- Accessors ----------
    @property
    def word_len(self) -> int:
        return self._word_len

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def get(self, word_id: int) -> str:
        if not 0 <= word_id < len(self._words):
            raise IndexError(f"Word id {word_id} out of range 0..{len(self._words)}")
        return self._words[word_id]

    __getitem__ = get

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __eq__(self, other):
        if not isinstance(other, Dictionary):
            return NotImplemented
        return self._word_len == other._word_len and self._words == other._words

    def __hash__(self):
        return hash((self._word_len, self._words))

    def __repr__(self):
        return f"Dictionary(words={len(self._words)}, word_len={self._word_len})"


class WordIndex:
    """Word text -> id, for resolving user supplied words. Later duplicates win."""

    __slots__ = ("_index",)

    def __init__(self, index: Dict[str, int]):
        self._index = index

    @classmethod
    def from_dictionary(cls, dictionary: Dictionary) -> "WordIndex":
        return cls({word: wi for wi, word in enumerate(dictionary)})

    def get(self, word: str) -> Optional[int]:
        return self._index.get(word)

    def lookup(self, word: str) -> int:
        wi = self._index.get(word)
        if wi is None:
            raise WordNotFoundError(word)
        return wi

    __getitem__ = lookup

    def __contains__(self, word) -> bool:
        return word in self._index

    def __len__(self) -> int:
        return len(self._index)
