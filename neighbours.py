# neighbours.py
# One-substitution adjacency over a Dictionary.
#
# Column sets are bitsets held in plain ints: bit i is set when word i has the
# given character at the given position. Intersecting the columns of every
# position but one leaves the words that can differ from a word only at that
# position; subtracting the excluded column removes the ones that do not.

import time
from typing import Dict, FrozenSet, Iterable, Iterator, List, Set, Tuple

from dictionary import Dictionary
from errors import FormatError
from utils import tlog, vlog

Columns = List[Dict[str, int]]

_EMPTY: FrozenSet[int] = frozenset()


def iter_bits(bits: int) -> Iterator[int]:
    """Yield positions of set bits, lowest first."""
    while bits:
        low = bits & -bits
        yield low.bit_length() - 1
        bits ^= low


def build_columns(dictionary: Dictionary) -> Columns:
    """For every position, map character -> bitset of word ids having it there."""
    columns: Columns = [{} for _ in range(dictionary.word_len)]
    for wi, word in enumerate(dictionary):
        bit = 1 << wi
        for ci, ch in enumerate(word):
            column = columns[ci]
            column[ch] = column.get(ch, 0) | bit
    return columns


def _word_neighbours(word: str, columns: Columns, everyone: int) -> Iterator[int]:
    for exclude_ci, exclude_ch in enumerate(word):
        candidates = everyone
        for ci, ch in enumerate(word):
            if ci == exclude_ci:
                continue
            candidates &= columns[ci].get(ch, 0)
            if not candidates:
                break
        if not candidates:
            continue
        candidates &= ~columns[exclude_ci].get(exclude_ch, 0)
        yield from iter_bits(candidates)


class Neighbours:
    """
    Symmetric adjacency map: word id -> ids one substitution away.
    Ids without neighbours have no entry; get() returns an empty set for them.
    """

    __slots__ = ("_edges",)

    def __init__(self, edges: Dict[int, Set[int]]):
        self._edges = {k: frozenset(v) for k, v in edges.items() if v}

    @classmethod
    def from_dictionary(cls, dictionary: Dictionary) -> "Neighbours":
        if len(dictionary) == 0:
            raise FormatError("Empty dict")
        t0 = time.time()
        columns = build_columns(dictionary)
        vlog(f"Built {len(columns)} column sets for {len(dictionary)} words", t0)

        # Intersection over zero positions (one-letter words) is every id.
        everyone = (1 << len(dictionary)) - 1
        edges: Dict[int, Set[int]] = {}
        for wi, word in enumerate(dictionary):
            for neighbour in _word_neighbours(word, columns, everyone):
                edges.setdefault(wi, set()).add(neighbour)
                edges.setdefault(neighbour, set()).add(wi)
        result = cls(edges)
        vlog(f"Neighbours map: {len(result)} connected words, {result.edge_count()} edges", t0)
        tlog(f"Isolated words: {len(dictionary) - len(result)}")
        return result

    def get(self, word_id: int) -> FrozenSet[int]:
        return self._edges.get(word_id, _EMPTY)

    def items(self) -> Iterable[Tuple[int, FrozenSet[int]]]:
        return sorted(self._edges.items())

    @property
    def edges(self) -> Dict[int, FrozenSet[int]]:
        return dict(self._edges)

    def edge_count(self) -> int:
        """Number of undirected edges."""
        return sum(len(v) for v in self._edges.values()) // 2

    def __contains__(self, word_id) -> bool:
        return word_id in self._edges

    def __len__(self) -> int:
        return len(self._edges)

    def __eq__(self, other):
        if not isinstance(other, Neighbours):
            return NotImplemented
        return self._edges == other._edges

    def __repr__(self):
        return f"Neighbours(words={len(self._edges)}, edges={self.edge_count()})"
