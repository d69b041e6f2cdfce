import sys

from bstree.config import parse_keys
from bstree.report import run_once, VERSION


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] in ("--version", "-v"):
        print(f"BST Tool v{VERSION}")
        sys.exit(0)
    try:
        keys = parse_keys(",".join(sys.argv[1:]), "command line keys") if len(sys.argv) > 1 else None
        run_once(keys=keys)
    except RuntimeError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
