## healthsync/utils.py

from __future__ import annotations
import os, logging
from pathlib import Path

LOG_DIR = Path(os.getenv("HEALTHSYNC_LOG_DIR", "logs"))
LOG_DIR.mkdir(parents=True, exist_ok=True)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    handlers=[
        logging.FileHandler(LOG_DIR / "pipeline.log"),
        logging.StreamHandler()
    ],
)
logger = logging.getLogger("healthsync")

WORK_DIRS = ("incoming", "quarantine", "store", "logs")


def load_yaml(path: str) -> dict:
    import yaml
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

def ensure_dirs(root: str | os.PathLike = "."):
    for d in WORK_DIRS:
        os.makedirs(os.path.join(root, d), exist_ok=True)
