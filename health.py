from __future__ import annotations
import os, sys, traceback
from datetime import datetime, timedelta
from pathlib import Path

from healthsync.pipeline import open_store
from healthsync.utils import LOG_DIR, load_yaml

# ---------- Paths ----------
ROOT = Path(__file__).resolve().parent
CONFIG = ROOT / "config.yaml"
LOG_PATH = LOG_DIR / "pipeline.log"
INCOMING = ROOT / "incoming"
QUARANTINE = ROOT / "quarantine"

def human(n: float) -> str:
    return f"{n:,.0f}"

def count_files(p: Path) -> int:
    if not p.exists():
        return 0
    return sum(1 for f in p.rglob("*") if f.is_file())

def recent_files_per_minute(p: Path, minutes: int = 5) -> float:
    if not p.exists():
        return 0.0
    cutoff = datetime.now() - timedelta(minutes=minutes)
    hits = sum(1 for f in p.rglob("*")
               if f.is_file() and datetime.fromtimestamp(f.stat().st_mtime) >= cutoff)
    return hits / max(minutes, 1)

def store_counts(cfg: dict) -> tuple[int, int] | None:
    """(reports, vitals records) in the KV store, or None if it can't be read."""
    try:
        store = open_store(cfg)
        return store.count("report:"), store.count("vitals:")
    except Exception:
        traceback.print_exc()
        return None

def tail(path: Path, lines: int = 20) -> list[str]:
    if not path.exists():
        return ["<log file not found>"]
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        txt = f.read().splitlines()[-lines:]
    return txt if txt else ["<empty>"]

def main():
    cfg = load_yaml(str(CONFIG)) if CONFIG.exists() else {}
    print("="*70)
    print("HealthSync report pipeline — Health Report")
    print(f"As of: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print("="*70)

    print(f"\nIncoming folder: {INCOMING}")
    print(f"  Reports waiting:      {human(count_files(INCOMING))}")
    print(f"  Quarantined files:    {human(count_files(QUARANTINE))}")
    print(f"  Arrival rate (5m):    {recent_files_per_minute(INCOMING):.2f} files/min")

    counts = store_counts(cfg)
    if counts is None:
        print("\nStore: unavailable (see error above)")
    else:
        reports, vitals = counts
        print(f"\nStored reports:        {human(reports)}")
        print(f"Stored vitals records: {human(vitals)}")
        if reports:
            print(f"  Reports with vitals:  {vitals/reports*100:.1f}%")

    print(f"\nLog tail: {LOG_PATH}")
    for line in tail(LOG_PATH, lines=20):
        print("  " + line)

    print("\nDone.\n")

if __name__ == "__main__":
    os.chdir(ROOT)
    sys.exit(main())
