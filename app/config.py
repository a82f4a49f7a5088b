import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DATA_DIR = Path(os.getenv("MOUNTAIN_FLOW_DATA_DIR", "data"))
LOG_LEVEL = os.getenv("MOUNTAIN_FLOW_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    name = (level or LOG_LEVEL).strip().upper()
    resolved = logging.getLevelName(name)
    if isinstance(resolved, int):
        logging.basicConfig(level=resolved, format=LOG_FORMAT)
        return
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    logging.getLogger(__name__).warning("Unknown log level %r, using INFO", name)
