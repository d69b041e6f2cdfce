import logging
import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv


INSERT_MODES = ("iterative", "recursive")
LOG_OUTPUTS = ("console", "file", "both")
DEFAULT_KEYS = "5,3,8,1,4,7,9"


@dataclass(frozen=True)
class Settings:
    keys: List[int]
    insert_mode: str
    remove_keys: List[int]
    log_level: int
    log_output: str
    log_dir: str


def parse_keys(raw: Optional[str], name: str = "BST_KEYS") -> List[int]:
    """Parse a comma separated list of integer keys. Blank entries are skipped."""
    if raw is None:
        return []
    keys = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            keys.append(int(part))
        except ValueError as e:
            raise RuntimeError(f"{name} must hold comma separated integers, got {part!r}.") from e
    return keys


def _get_env_choice(name: str, default: str, choices: tuple) -> str:
    raw = os.getenv(name, default).strip().lower() or default
    if raw not in choices:
        raise RuntimeError(f"{name} must be one of {', '.join(choices)}; got {raw!r}.")
    return raw


def _get_env_level(name: str, default: str) -> int:
    raw = os.getenv(name, default).strip().upper() or default
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise RuntimeError(f"{name} is not a logging level: {raw!r}.")
    return level


def load_settings() -> Settings:
    load_dotenv()

    return Settings(
        keys=parse_keys(os.getenv("BST_KEYS", DEFAULT_KEYS)),
        insert_mode=_get_env_choice("BST_INSERT_MODE", "iterative", INSERT_MODES),
        remove_keys=parse_keys(os.getenv("BST_REMOVE_KEYS", ""), "BST_REMOVE_KEYS"),
        log_level=_get_env_level("BST_LOG_LEVEL", "WARNING"),
        log_output=_get_env_choice("BST_LOG_OUTPUT", "console", LOG_OUTPUTS),
        log_dir=os.getenv("BST_LOG_DIR", "./logs").strip() or "./logs",
    )
