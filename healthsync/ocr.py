## healthsync/ocr.py

from __future__ import annotations
import itertools
from datetime import date
from typing import Optional

"""
Simulated OCR for uploaded reports.

No document recognition happens here: each call returns the next of three
canned report texts, in a fixed rotation, with today's date filled in.
"""

SAMPLE_TEXTS = (
    """
    MEDICAL REPORT
    Patient: John Doe
    Date: {today}

    VITAL SIGNS:
    Blood Pressure: 128/82 mmHg
    Blood Sugar (Fasting): 98 mg/dL
    Heart Rate: 72 bpm
    Temperature: 98.6°F
    Weight: 165 lbs

    LABORATORY RESULTS:
    Cholesterol: 185 mg/dL
    HDL: 52 mg/dL
    LDL: 110 mg/dL

    DIAGNOSIS: Patient shows normal vital signs with slightly elevated BP.
    Recommend lifestyle modifications and follow-up in 3 months.
    """,
    """
    BLOOD TEST RESULTS
    Patient Name: Jane Smith
    Test Date: {today}

    GLUCOSE PROFILE:
    Fasting Blood Sugar: 112 mg/dL
    HbA1c: 5.8%

    CARDIOVASCULAR:
    Blood Pressure: 135/88 mmHg
    Total Cholesterol: 220 mg/dL
    Triglycerides: 155 mg/dL

    Heart Rate: 78 bpm

    NOTES: Pre-diabetic range. Recommend dietary changes and exercise.
    """,
    """
    HEALTH CHECKUP REPORT
    Date: {today}

    VITALS:
    BP: 118/75 mmHg
    Pulse: 68 bpm
    Blood Sugar (Random): 105 mg/dL
    Temperature: 98.2°F

    BMI: 23.5 (Normal)

    All parameters within normal range.
    Patient is healthy. Annual checkup recommended.
    """,
)


class SampleOCR:
    def __init__(self, samples=SAMPLE_TEXTS):
        if not samples:
            raise ValueError("SampleOCR needs at least one sample text")
        self._cycle = itertools.cycle(samples)

    def recognize(self, file_type: Optional[str] = None, *, today: Optional[date] = None) -> str:
        """Return the next sample text. ``file_type`` is accepted but unused."""
        today = today or date.today()
        return next(self._cycle).format(today=today.strftime("%m/%d/%Y"))


_default = SampleOCR()


def simulate_ocr(file_type: Optional[str] = None) -> str:
    return _default.recognize(file_type)
