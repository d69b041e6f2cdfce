import os
import sys

from dotenv import load_dotenv

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from bstree.config import DEFAULT_KEYS, INSERT_MODES, _get_env_choice, parse_keys
from bstree.report import build_tree


def main() -> None:
    load_dotenv()

    keys = parse_keys(os.getenv("BST_KEYS", DEFAULT_KEYS))
    mode = _get_env_choice("BST_INSERT_MODE", "iterative", INSERT_MODES)

    print("Loaded env:")
    print(f"- BST_KEYS={keys}")
    print(f"- BST_INSERT_MODE={mode}")

    tree = build_tree(keys, mode)
    in_order = tree.dfs_in_order()

    print("\nChecking ordering...")
    if any(a >= b for a, b in zip(in_order, in_order[1:])):
        raise SystemExit(f"FAILED ordering. in-order={in_order}")
    print(f"OK ordering. {len(in_order)} unique keys ascending.")

    print("\nChecking membership...")
    missing = [k for k in keys if tree.find(k) is None or tree.find_recursively(k) is None]
    if missing:
        raise SystemExit(f"FAILED membership. missing={missing}")
    print("OK membership. every inserted key found iteratively and recursively.")

    print("\nChecking traversal sizes...")
    sizes = {
        "pre": len(tree.dfs_pre_order()),
        "in": len(in_order),
        "post": len(tree.dfs_post_order()),
        "bfs": len(tree.bfs()),
    }
    if len(set(sizes.values())) != 1 or sizes["in"] != len(tree):
        raise SystemExit(f"FAILED traversal sizes. {sizes} len={len(tree)}")
    print(f"OK traversal sizes. {sizes}")

    print(f"\nbalanced={tree.is_balanced()} height={tree.height()} second_highest={tree.find_second_highest()}")


if __name__ == "__main__":
    main()
