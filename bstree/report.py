import logging
from typing import Iterable, Optional

from bstree.bst import BST
from bstree.config import INSERT_MODES, Settings, load_settings
from bstree.logger_config import configure_logger

VERSION = "1.0.0"

logger = logging.getLogger(__name__)


def build_tree(keys: Iterable[int], mode: str = "iterative") -> BST:
    if mode not in INSERT_MODES:
        raise RuntimeError(f"Insert mode must be one of {', '.join(INSERT_MODES)}; got {mode!r}.")
    tree = BST()
    insert = tree.insert_recursively if mode == "recursive" else tree.insert
    for key in keys:
        insert(key)
    return tree


def _fmt(value) -> str:
    return "none" if value is None else str(value)


def run_once(settings: Optional[Settings] = None, keys: Optional[Iterable[int]] = None) -> BST:
    if settings is None:
        settings = load_settings()
    configure_logger(
        level=settings.log_level,
        output=settings.log_output,
        log_dir=settings.log_dir,
    )

    keys = list(settings.keys if keys is None else keys)
    tree = build_tree(keys, settings.insert_mode)
    logger.info("Built tree of %d nodes from %d keys (%s)", len(tree), len(keys), settings.insert_mode)

    print(f"Inserted {len(keys)} keys ({settings.insert_mode}) -> {len(tree)} nodes")

    for key in settings.remove_keys:
        removed = tree.remove(key)
        if removed is None:
            print(f"- remove {key}: not found")
        else:
            print(f"- remove {key}: removed")

    print("Traversals:")
    print(f"- pre-order:  {tree.dfs_pre_order()}")
    print(f"- in-order:   {tree.dfs_in_order()}")
    print(f"- post-order: {tree.dfs_post_order()}")
    print(f"- bfs:        {tree.bfs()}")

    print("\nSummary:")
    print(f"- height = {tree.height()}")
    print(f"- balanced = {tree.is_balanced()}")
    print(f"- second highest = {_fmt(tree.find_second_highest())}")

    return tree
