## healthsync/extractor.py

from __future__ import annotations
import sys, json
from pathlib import Path

from .patterns import BLOOD_PRESSURE_RE, SINGLE_VALUE
from .schemas import VitalsRecord

"""
Vitals extraction from report text.

Every field is searched independently and case-insensitively; the first
occurrence in the text wins. Fields that do not match are left out.

Usage:
  python -m healthsync.extractor <report.txt>
"""


def extract(text: str) -> VitalsRecord:
    vitals = {}
    if not text:
        return VitalsRecord()

    bp = BLOOD_PRESSURE_RE.search(text)
    if bp:
        vitals["systolic"] = int(bp.group(1))
        vitals["diastolic"] = int(bp.group(2))
        vitals["bloodPressure"] = f"{bp.group(1)}/{bp.group(2)}"

    for pattern in SINGLE_VALUE:
        value = pattern.search(text)
        if value is not None:
            vitals[pattern.field] = value

    return VitalsRecord(**vitals)


def main():
    if len(sys.argv) < 2:
        print("Usage: python -m healthsync.extractor <report.txt>")
        sys.exit(1)
    src = Path(sys.argv[1])
    if not src.exists():
        raise FileNotFoundError(src)
    record = extract(src.read_text(encoding="utf-8", errors="replace"))
    print(json.dumps(record.to_dict(), indent=2))

if __name__ == "__main__":
    main()
