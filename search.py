# search.py

import heapq
import time
from typing import Dict, List, Optional

from colorama import Fore

import utils
from dictionary import Dictionary, WordIndex
from errors import PathNotFoundError
from neighbours import Neighbours
from utils import log_with_time, tlog, vlog


def heuristic(goal_word: str, word: str) -> int:
    """Number of positions where ``word`` differs from ``goal_word``."""
    return sum(1 for a, b in zip(goal_word, word) if a != b)


def reconstruct_path(came_from: Dict[int, int], current: int) -> List[int]:
    """Follow predecessors from ``current`` back to the start (current first)."""
    total_path = [current]
    while current in came_from:
        current = came_from[current]
        total_path.append(current)
    return total_path


def a_star(neighbours: Neighbours, dictionary: Dictionary, start: int, goal: int) -> List[int]:
    """
    A* over the neighbour graph with unit edges and the mismatch heuristic.

    Returns word ids from ``goal`` back to ``start`` inclusive. Raises
    PathNotFoundError when the open set runs dry without reaching ``goal``.

    Heap entries are ``(g + h, h, id)``: among equal estimates the word with
    fewer mismatches comes first, and ids settle any remaining tie so the
    expansion order never depends on set iteration. A node whose g_score
    improves while it is still open is pushed again at the better score.
    """
    end = dictionary[goal]
    verbose = utils.VERBOSE or utils.TRACE

    score = heuristic(end, dictionary[start])
    vlog(f"Saving start node to open set with score = {score}")
    open_set = [(score, score, start)]

    came_from: Dict[int, int] = {}
    g_score: Dict[int, int] = {start: 0}

    while open_set:
        score, h, current = open_set[0]
        if current != goal and score - h > g_score[current]:
            # Superseded by a cheaper entry pushed for the same node
            heapq.heappop(open_set)
            continue
        if verbose:
            tlog(f"Trying node {current}: '{dictionary[current]}'")
        if current == goal:
            vlog(f"Found! {len(g_score)} nodes scored")
            return reconstruct_path(came_from, current)

        heapq.heappop(open_set)

        current_neighbours = neighbours.get(current)
        if not current_neighbours and verbose:
            tlog(f"Node {current}: '{dictionary[current]}' has no neighbours")
        tentative_g_score = g_score[current] + 1
        for neighbour in sorted(current_neighbours):
            stored_g_score = g_score.get(neighbour)
            if stored_g_score is not None and tentative_g_score >= stored_g_score:
                continue
            if verbose:
                tlog(
                    f"Neighbour '{dictionary[neighbour]}': g_score {tentative_g_score} "
                    f"(stored {stored_g_score})"
                )
            came_from[neighbour] = current
            g_score[neighbour] = tentative_g_score
            # An open node gets a fresh entry; the old one is skipped when it surfaces.
            h = heuristic(end, dictionary[neighbour])
            heapq.heappush(open_set, (tentative_g_score + h, h, neighbour))

    if verbose:
        log_with_time("Not found!", color=Fore.RED)
    raise PathNotFoundError(dictionary[start], end)


def find_path(
    dictionary: Dictionary,
    neighbours: Neighbours,
    begin: str,
    end: str,
    index: Optional[WordIndex] = None,
) -> List[str]:
    """Resolve ``begin``/``end`` and return the ladder as words, begin first."""
    t0 = time.time()
    if index is None:
        index = WordIndex.from_dictionary(dictionary)
    begin_i = index.lookup(begin)
    end_i = index.lookup(end)
    path = a_star(neighbours, dictionary, begin_i, end_i)
    vlog(f"Path of {len(path) - 1} steps", t0)
    return [dictionary[i] for i in reversed(path)]
