"""
healthsync package: report ingestion and vitals extraction for the
HealthSync patient portal.
- extractor: report text -> VitalsRecord (pattern table in patterns)
- ocr: simulated OCR over canned report texts
- pipeline: read -> OCR -> extract -> store, quarantine + alerts on failure
- sinks: key-value store (SQLAlchemy) and parquet export
- trends: per-user vitals history and summaries
- watcher: polling loop over incoming/
- alerts: email/slack on failures
"""

__all__ = [
    "extractor",
    "patterns",
    "ocr",
    "pipeline",
    "sinks",
    "trends",
    "watcher",
    "alerts",
    "schemas",
    "utils",
]

__version__ = "0.1.0"

# Load .env early when python-dotenv is installed
try:
    from dotenv import load_dotenv  # type: ignore
    load_dotenv()
except ImportError:
    pass
