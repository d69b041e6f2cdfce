import logging
import os
import runpy
import sys

import pytest

from bstree import config

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
MAIN = os.path.join(PROJECT_ROOT, "main.py")
CHECK_TREE = os.path.join(PROJECT_ROOT, "scripts", "check_tree.py")


@pytest.fixture(autouse=True)
def isolated(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda: False)
    monkeypatch.setattr("dotenv.load_dotenv", lambda: False)
    yield
    logger = logging.getLogger("bstree")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_version_flag(monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, "argv", ["main.py", "--version"])

    with pytest.raises(SystemExit) as excinfo:
        runpy.run_path(MAIN, run_name="__main__")

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("BST Tool v")


def test_keys_from_argv(monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, "argv", ["main.py", "1", "2", "3", "4", "5"])

    runpy.run_path(MAIN, run_name="__main__")

    out = capsys.readouterr().out
    assert "- in-order:   [1, 2, 3, 4, 5]" in out
    assert "- balanced = False" in out


def test_bad_argv_key_exits_nonzero(monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, "argv", ["main.py", "1", "oops"])

    with pytest.raises(SystemExit) as excinfo:
        runpy.run_path(MAIN, run_name="__main__")

    assert excinfo.value.code == 1
    assert "oops" in capsys.readouterr().err


def test_check_tree_script(monkeypatch, capsys) -> None:
    monkeypatch.setenv("BST_KEYS", "5,3,8,1,4,7,9,4")
    monkeypatch.setattr(sys, "argv", ["check_tree.py"])

    runpy.run_path(CHECK_TREE, run_name="__main__")

    out = capsys.readouterr().out
    assert "OK ordering. 7 unique keys ascending." in out
    assert "OK membership." in out
    assert "balanced=True height=2 second_highest=8" in out


def test_recursive_mode_on_deep_chain_exits_nonzero(monkeypatch, capsys) -> None:
    monkeypatch.setenv("BST_INSERT_MODE", "recursive")
    monkeypatch.setattr(sys, "argv", ["main.py"] + [str(k) for k in range(3000)])

    with pytest.raises(SystemExit) as excinfo:
        runpy.run_path(MAIN, run_name="__main__")

    assert excinfo.value.code == 1
    assert "too deep" in capsys.readouterr().err


def test_check_tree_script_rejects_unknown_mode(monkeypatch) -> None:
    monkeypatch.setenv("BST_INSERT_MODE", "sideways")
    monkeypatch.setattr(sys, "argv", ["check_tree.py"])

    with pytest.raises(RuntimeError, match="BST_INSERT_MODE"):
        runpy.run_path(CHECK_TREE, run_name="__main__")
