from __future__ import annotations
import re
from dataclasses import dataclass, field as dc_field
from typing import Callable, Optional, Tuple

# label, then one or more colons/whitespace (any unicode space), then the reading
SEP = r"[:\s]+"

# Numeric shapes; [0-9] keeps digits ASCII-only
TWO_THREE = r"[0-9]{2,3}"
TWO_THREE_DEC = r"[0-9]{2,3}(?:\.[0-9])?"
# a reading with more digits than the shape allows is left out, not truncated
ONE_DEC = r"[0-9](?:\.[0-9])?(?!\.?[0-9])"

# Optional unit tails (never required for a match)
MG_DL = r"mg/dl"
DEGREE = r"°?\s*[fc]\b|°"

FLAGS = re.I


def label_alternation(labels: Tuple[str, ...]) -> str:
    return "|".join(re.escape(lbl).replace(r"\ ", r"\s+") for lbl in labels)


@dataclass(frozen=True)
class VitalPattern:
    """One labeled reading: label -> separator -> number -> optional unit."""
    field: str
    labels: Tuple[str, ...]
    number: str
    unit: Optional[str] = None
    convert: Callable[[str], object] = int
    regex: re.Pattern = dc_field(init=False, repr=False, compare=False)

    def __post_init__(self):
        tail = rf"(?:\s*(?:{self.unit}))?" if self.unit else ""
        rx = re.compile(rf"(?:{label_alternation(self.labels)}){SEP}({self.number}){tail}", FLAGS)
        object.__setattr__(self, "regex", rx)

    def search(self, text: str):
        m = self.regex.search(text)
        if not m:
            return None
        return self.convert(m.group(1))


BP_LABELS = ("blood pressure", "bp")
BLOOD_PRESSURE_RE = re.compile(
    rf"(?:{label_alternation(BP_LABELS)}){SEP}({TWO_THREE})\s*/\s*({TWO_THREE})", FLAGS
)

SINGLE_VALUE = (
    VitalPattern("bloodSugar", ("blood sugar", "glucose", "fasting"), TWO_THREE, MG_DL),
    VitalPattern("heartRate", ("heart rate", "pulse", "hr"), TWO_THREE, r"bpm"),
    VitalPattern("temperature", ("temperature", "temp"), TWO_THREE_DEC, DEGREE, float),
    VitalPattern("weight", ("weight",), TWO_THREE, r"lbs|kg"),
    VitalPattern("cholesterol", ("total cholesterol", "cholesterol"), TWO_THREE, MG_DL),
    VitalPattern("hba1c", ("hba1c",), ONE_DEC, r"%", float),
)
