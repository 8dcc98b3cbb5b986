## healthsync/pipeline.py

from __future__ import annotations
import os, shutil, mimetypes, time
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .utils import logger, load_yaml
from .alerts import notify_failure
from .extractor import extract
from .ocr import simulate_ocr
from .schemas import Report, StoredVitals
from .sinks import KVStore, to_parquet

DEFAULT_TEXT_SUFFIXES = (".txt", ".text", ".md")


def open_store(cfg: dict) -> KVStore:
    st = cfg.get("store", {})
    return KVStore(st.get("uri", "sqlite:///store/healthsync.sqlite"), st.get("table", "kv_store"))


def resolve_user(path: Path, cfg: dict) -> str:
    # incoming/<user_id>/<file> belongs to <user_id>; files at the top level use the default
    incoming = Path(cfg.get("incoming_dir", "incoming")).resolve()
    parent = path.resolve().parent
    if parent != incoming and parent.parent == incoming:
        return parent.name
    return cfg.get("default_user_id", "anonymous")


def read_report(path: Path, cfg: dict) -> tuple[str, str]:
    """Return (mime type, text). Plain-text reports are read as-is; anything
    else goes through simulated OCR."""
    limit = cfg.get("max_file_bytes")
    size = path.stat().st_size
    if limit and size > limit:
        raise ValueError(f"Report too large: {size} bytes (limit {limit})")
    file_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    suffixes = tuple(cfg.get("text_suffixes", DEFAULT_TEXT_SUFFIXES))
    if path.suffix.lower() in suffixes:
        return file_type, path.read_text(encoding="utf-8", errors="replace")
    return file_type, simulate_ocr(file_type)


def new_report_id(store: KVStore) -> str:
    ms = int(time.time() * 1000)
    while store.get(f"report:report_{ms}") is not None:
        ms += 1
    return f"report_{ms}"


def ingest(path: Path, cfg: dict, store: KVStore) -> Report:
    user_id = resolve_user(path, cfg)
    file_type, text = read_report(path, cfg)
    vitals = extract(text)

    now = datetime.now(timezone.utc).isoformat()
    report = Report(
        id=new_report_id(store),
        userId=user_id,
        fileName=path.name,
        fileType=file_type,
        filePath=f"{user_id}/{path.name}",
        reportType=cfg.get("report_type", "General"),
        uploadedAt=now,
        ocrText=text,
        vitals=vitals.to_dict(),
    )
    store.set(f"report:{report.id}", report.model_dump(by_alias=True))

    if vitals:
        row = StoredVitals.from_record(report.id, user_id, now, vitals).model_dump(by_alias=True)
        store.set(f"vitals:{user_id}:{report.id}", row)
        pq = cfg.get("sinks", {}).get("parquet", {})
        if pq.get("enabled"):
            to_parquet([row], pq["path"], pq.get("mode", "append"))
    else:
        logger.warning(f"No vitals recognised in {path}")
    return report


def process_file(path: str, cfg_path: str = "config.yaml", store: Optional[KVStore] = None):
    cfg = load_yaml(cfg_path)
    try:
        store = store or open_store(cfg)
        report = ingest(Path(path), cfg, store)
        logger.info(f"Processed OK: {path} -> {report.id} ({len(report.vitals)} vitals)")
    except Exception as e:
        logger.exception(f"Failed processing {path}: {e}")
        qdir = cfg.get("quarantine_dir", "quarantine")
        try:
            os.makedirs(qdir, exist_ok=True)
            shutil.move(path, os.path.join(qdir, os.path.basename(path)))
        except OSError as move_err:
            logger.error(f"Could not quarantine {path}: {move_err}")
        notify_failure(path, e)
        return False
    else:
        return True
