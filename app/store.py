import json
import logging
import re
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

KEY_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


class PreferenceStore:
    """Key/value store keeping one JSON document per key under ``data_dir``.

    Values are written verbatim on every save and read back verbatim; there is
    no merging with defaults and no schema migration.
    """

    def __init__(self, data_dir: Path) -> None:
        self.data_dir = Path(data_dir)

    def path_for(self, key: str) -> Path:
        if not KEY_PATTERN.match(key):
            raise ValueError(f"Invalid preference key: {key!r}")
        return self.data_dir / f"{key}.json"

    def load(self, key: str, default: Any) -> Any:
        path = self.path_for(key)
        if not path.exists():
            return default
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as err:
            logger.warning("Cannot read preference %s at %s: %s", key, path, err)
            return default
        if not text.strip():
            return default
        try:
            value = json.loads(text)
        except json.JSONDecodeError:
            logger.warning("Ignoring malformed preference %s at %s", key, path)
            return default
        # A stored null carries no state.
        return default if value is None else value

    def save(self, key: str, value: Any) -> None:
        path = self.path_for(key)
        payload = json.dumps(value, indent=2, ensure_ascii=False)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(payload, encoding="utf-8")
        except OSError as err:
            logger.warning("Could not save preference %s at %s: %s", key, path, err)
            return
        logger.debug("Saved preference %s", key)
