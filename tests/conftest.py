# tests/conftest.py
import os
import sys

import pytest

# Add the project root to the system path so `bstree` imports without installing
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from bstree.bst import BST

SAMPLE_KEYS = [5, 3, 8, 1, 4, 7, 9]


@pytest.fixture
def sample_tree() -> BST:
    """
    Tree built from SAMPLE_KEYS:

            5
          /   \\
         3     8
        / \\   / \\
       1   4 7   9
    """
    tree = BST()
    for key in SAMPLE_KEYS:
        tree.insert(key)
    return tree


@pytest.fixture(autouse=True)
def clear_bst_env(monkeypatch):
    """Keep developer .env / shell settings out of the config tests."""
    for name in (
        "BST_KEYS",
        "BST_INSERT_MODE",
        "BST_REMOVE_KEYS",
        "BST_LOG_LEVEL",
        "BST_LOG_OUTPUT",
        "BST_LOG_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
