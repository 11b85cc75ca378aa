import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import re

import pytest

import utils
from solver import run_solver

ANSI = re.compile(r'\x1b\[[0-9;]*[a-zA-Z]')

LADDER = "рожа роза поза пора пара парс паюс плюс плес плед след слет счет учет"


@pytest.fixture(autouse=True)
def reset_flags():
    yield
    utils.VERBOSE = False
    utils.TRACE = False


@pytest.fixture
def dict_file(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("\n".join(LADDER.split()) + "\n", encoding="utf-8")
    return path


def clean(text):
    return ANSI.sub('', text)


def test_path_output(dict_file, capsys):
    assert run_solver(["--dict", str(dict_file), "рожа", "учет"]) == 0
    assert capsys.readouterr().out.strip() == LADDER


def test_default_dictionary_path(capsys):
    assert run_solver(["рожа", "учет"]) == 0
    out = capsys.readouterr().out.split()
    assert out[0] == "рожа"
    assert out[-1] == "учет"


def test_dump(tmp_path, capsys):
    path = tmp_path / "dict.txt"
    path.write_text("aa\nab\nbb\ncd\n", encoding="utf-8")
    assert run_solver(["-d", str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["aa: ab", "ab: aa bb", "bb: ab", "cd: "]


def test_unknown_word(dict_file, capsys):
    assert run_solver(["--dict", str(dict_file), "рожа", "кофе"]) == 1
    err = clean(capsys.readouterr().err)
    assert "ERROR: Can not find end word: кофе" in err
    assert "because: Word not found in dictionary: 'кофе'" in err


def test_missing_end_word(dict_file, capsys):
    assert run_solver(["--dict", str(dict_file), "рожа"]) == 1
    assert "End word not defined" in clean(capsys.readouterr().err)


def test_path_not_found(tmp_path, capsys):
    path = tmp_path / "dict.txt"
    path.write_text("aa\nbb\n", encoding="utf-8")
    assert run_solver(["--dict", str(path), "aa", "bb"]) == 1
    err = clean(capsys.readouterr().err)
    assert "ERROR: Path from 'aa' to 'bb' does not exist" in err
    assert "because: Path not found" in err


def test_bad_dictionary(tmp_path, capsys):
    path = tmp_path / "dict.txt"
    path.write_text("aa\nabc\n", encoding="utf-8")
    assert run_solver(["--dict", str(path)]) == 1
    err = clean(capsys.readouterr().err)
    assert "Can not create dict from file" in err
    assert "expected 2, found 3" in err


def test_missing_dictionary_file(tmp_path, capsys):
    assert run_solver(["--dict", str(tmp_path / "nope.txt")]) == 1
    assert "Failed to read file" in clean(capsys.readouterr().err)


def test_save_then_load_graph(dict_file, tmp_path, capsys):
    graph = tmp_path / "graph.swpd"
    assert run_solver(["--dict", str(dict_file), "--save-graph", str(graph)]) == 0
    assert graph.exists()
    capsys.readouterr()
    assert run_solver(["--graph", str(graph), "рожа", "учет"]) == 0
    assert capsys.readouterr().out.strip() == LADDER


def test_cache_builds_once(tmp_path, capsys):
    cache = tmp_path / "cache.swpd"
    assert run_solver(["--cache", str(cache), "aa", "ab"]) == 1
    assert cache.exists()
    capsys.readouterr()
    assert run_solver(["--cache", str(cache), "рожа", "роза"]) == 0
    assert capsys.readouterr().out.strip() == "рожа роза"


def test_verbose_logs_to_stderr(dict_file, capsys):
    assert run_solver(["--verbose", "--dict", str(dict_file), "рожа", "роза"]) == 0
    captured = capsys.readouterr()
    assert captured.out.strip() == "рожа роза"
    assert "Dict ready" in clean(captured.err)


def test_help_exits_zero(capsys):
    with pytest.raises(SystemExit) as exc:
        run_solver(["--help"])
    assert exc.value.code == 0
    assert "Begin word" in capsys.readouterr().out


def test_unknown_begin_word(dict_file, capsys):
    assert run_solver(["--dict", str(dict_file), "кофе", "учет"]) == 1
    err = clean(capsys.readouterr().err)
    assert "ERROR: Can not find begin word: кофе" in err
