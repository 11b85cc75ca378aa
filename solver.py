# solver.py

import argparse
import sys
import time

from colorama import Fore

import utils
from dictionary import Dictionary
from errors import FormatError, PathNotFoundError, WordNotFoundError, WordPathError
from graph_cache import from_file, load_or_build, to_file
from neighbours import Neighbours
from search import find_path
from utils import log_error, log_with_time, vlog


def build_parser():
    parser = argparse.ArgumentParser(
        prog="shortest-word-path",
        description="Find shortest path between two words changing one letter at a time",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("-d", "--dict", metavar="FILE", default=None, help="Sets a custom dict file")
    source.add_argument("--dict-url", metavar="URL", default=None, help="Download the dict from URL")
    source.add_argument("--graph", metavar="FILE", default=None, help="Load dict and neighbours from a saved graph file")
    source.add_argument(
        "--cache",
        metavar="FILE",
        default=None,
        help="Load dict and neighbours from FILE, building and saving them there first if missing",
    )
    parser.add_argument("--save-graph", metavar="FILE", default=None, help="Save dict and neighbours to FILE")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--trace", action="store_true", help="Log every node the search touches")
    parser.add_argument("word_begin", nargs="?", default=None, help="Begin word")
    parser.add_argument("word_end", nargs="?", default=None, help="End word")
    return parser


def load_dictionary(args):
    if args.dict:
        return Dictionary.create_from_file(args.dict)
    if args.dict_url:
        return Dictionary.create_from_url(args.dict_url)
    return Dictionary.create_default()


def load_graph(args):
    if args.graph:
        return from_file(args.graph)
    if args.cache:
        return load_or_build(lambda: load_dictionary(args), args.cache)
    dictionary = load_dictionary(args)
    try:
        neighbours = Neighbours.from_dictionary(dictionary)
    except FormatError as e:
        raise FormatError("Can not create neighbours map") from e
    return dictionary, neighbours


def dump_dictionary(dictionary, neighbours, out=None):
    out = out or sys.stdout
    for wi, word in enumerate(dictionary):
        line = " ".join(dictionary[ni] for ni in sorted(neighbours.get(wi)))
        print(f"{word}: {line}", file=out)


def print_path(dictionary, neighbours, begin, end, out=None):
    out = out or sys.stdout
    if begin is None:
        raise WordPathError("Begin word not defined")
    if end is None:
        raise WordPathError("End word not defined")

    try:
        words = find_path(dictionary, neighbours, begin, end)
    except WordNotFoundError as e:
        which = "begin" if e.word == begin else "end"
        raise WordPathError(f"Can not find {which} word: {e.word}") from e
    except PathNotFoundError as e:
        raise WordPathError(f"Path from '{begin}' to '{end}' does not exist") from e
    print(" ".join(words), file=out)
    return words


def run_solver(argv=None):
    args = build_parser().parse_args(argv)

    utils.start_time = time.time()
    utils.VERBOSE = args.verbose
    utils.TRACE = args.trace

    try:
        t0 = time.time()
        dictionary, neighbours = load_graph(args)
        vlog(f"Dict ready: {len(dictionary)} words of length {dictionary.word_len}", t0)
        if args.save_graph:
            to_file(args.save_graph, dictionary, neighbours)

        if args.word_begin is None and args.word_end is None:
            vlog("No words defined, dump dict")
            dump_dictionary(dictionary, neighbours)
            return 0

        print_path(dictionary, neighbours, args.word_begin, args.word_end)
    except WordPathError as e:
        log_error(e)
        return 1

    if utils.VERBOSE:
        log_with_time(f"Total time: {time.time() - utils.start_time:.3f}s", color=Fore.GREEN)
    return 0
