## healthsync/watcher.py

from __future__ import annotations
import time, glob, os, sys
from .utils import logger, ensure_dirs, load_yaml
from .pipeline import process_file, open_store


def poll_once(pattern: str, seen: set, cfg_path: str, store=None) -> int:
    """Process every matching file not seen before; return how many were picked up."""
    n = 0
    for path in sorted(glob.glob(pattern, recursive=True)):
        if path in seen or not os.path.isfile(path): continue
        process_file(path, cfg_path, store=store)
        seen.add(path)
        n += 1
    return n


def run(cfg_path: str = "config.yaml"):
    ensure_dirs()
    cfg = load_yaml(cfg_path)
    incoming = cfg.get("incoming_dir", "incoming")
    pattern = os.path.join(incoming, "**", cfg.get("file_glob", "*.txt"))
    poll = cfg.get("watcher", {}).get("poll_seconds", 3)
    store = open_store(cfg)

    seen = set()
    logger.info(f"Watching {pattern} for new reports...")
    while True:
        poll_once(pattern, seen, cfg_path, store)
        time.sleep(poll)

if __name__ == "__main__":
    run(sys.argv[1] if len(sys.argv) > 1 else "config.yaml")
