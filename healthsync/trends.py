## healthsync/trends.py

from __future__ import annotations
import pandas as pd
from typing import Dict, Any

from .sinks import KVStore

NUMERIC_FIELDS = ("systolic", "diastolic", "bloodSugar", "heartRate",
                  "temperature", "weight", "cholesterol", "hba1c")
FLOAT_FIELDS = ("temperature", "hba1c")

# Latest blood sugar above this is flagged for follow-up (mg/dL)
BLOOD_SUGAR_MONITOR = 100


def vitals_history(store: KVStore, user_id: str) -> pd.DataFrame:
    """All stored vitals for a user, oldest first. Fields missing from a
    record come back as NaN."""
    rows = store.get_by_prefix(f"vitals:{user_id}:")
    df = pd.DataFrame(rows)
    if df.empty:
        return pd.DataFrame(columns=["reportId", "userId", "date", *NUMERIC_FIELDS])
    for c in NUMERIC_FIELDS:
        if c not in df.columns:
            df[c] = float("nan")
        df[c] = pd.to_numeric(df[c], errors="coerce")
    df["date"] = pd.to_datetime(df["date"], errors="coerce", utc=True)
    return df.sort_values("date", kind="stable").reset_index(drop=True)


def running_average(history: pd.DataFrame, field: str) -> pd.Series:
    s = pd.to_numeric(history[field], errors="coerce")
    return s.expanding().mean()


def _latest(s: pd.Series, col: str):
    v = s.iloc[-1]
    return float(v) if col in FLOAT_FIELDS else int(v)


def summarize(history: pd.DataFrame) -> Dict[str, Dict[str, Any]]:
    """Latest value, average and count per metric, over present values only.
    Blood pressure gets a combined "sys/dia" latest and blood sugar a status."""
    out: Dict[str, Dict[str, Any]] = {}
    for col in NUMERIC_FIELDS:
        if col not in history.columns:
            continue
        s = pd.to_numeric(history[col], errors="coerce").dropna()
        if s.empty:
            continue
        avg = s.mean()
        out[col] = {
            "latest": _latest(s, col),
            "average": round(float(avg), 1) if col in FLOAT_FIELDS else int(round(avg)),
            "count": int(s.count()),
        }

    if {"systolic", "diastolic"} <= set(out):
        both = history.dropna(subset=["systolic", "diastolic"])
        if not both.empty:
            last = both.iloc[-1]
            out["bloodPressure"] = {"latest": f"{int(last['systolic'])}/{int(last['diastolic'])}"}

    if "bloodSugar" in out:
        out["bloodSugar"]["status"] = (
            "Monitor" if out["bloodSugar"]["latest"] > BLOOD_SUGAR_MONITOR else "Normal"
        )
    return out
