# simple storage helpers for the json files under data/
import json
from pathlib import Path

from utils.logging import get_logger

logger = get_logger(__name__)


def read_json_file(path: Path, default=None):
    if not path.exists():
        return default
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Failed to read %s: %s", path, e)
        return default


def write_json_file(path: Path, content):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(content, indent=2), encoding="utf-8")
