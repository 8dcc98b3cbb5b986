import os
import tempfile

import pytest
import yaml

# keep test logs out of the working tree; must be set before healthsync.utils is imported
os.environ.setdefault("HEALTHSYNC_LOG_DIR", tempfile.mkdtemp(prefix="healthsync-logs-"))

from healthsync.sinks import KVStore


@pytest.fixture
def store(tmp_path):
    return KVStore(f"sqlite:///{tmp_path / 'kv.sqlite'}")


@pytest.fixture
def workdir(tmp_path):
    incoming = tmp_path / "incoming"
    quarantine = tmp_path / "quarantine"
    incoming.mkdir()
    quarantine.mkdir()
    return tmp_path


@pytest.fixture
def cfg(workdir):
    return {
        "incoming_dir": str(workdir / "incoming"),
        "quarantine_dir": str(workdir / "quarantine"),
        "default_user_id": "anonymous",
        "report_type": "General",
        "text_suffixes": [".txt"],
        "max_file_bytes": 100_000,
        "store": {"uri": f"sqlite:///{workdir / 'kv.sqlite'}", "table": "kv_store"},
        "sinks": {"parquet": {"enabled": False}},
    }


@pytest.fixture
def cfg_path(workdir, cfg):
    p = workdir / "config.yaml"
    p.write_text(yaml.safe_dump(cfg), encoding="utf-8")
    return str(p)


@pytest.fixture(autouse=True)
def no_alert_channels(monkeypatch):
    for var in ("SMTP_HOST", "SMTP_USER", "SMTP_PASS", "ALERT_EMAIL_TO", "SLACK_WEBHOOK_URL"):
        monkeypatch.delenv(var, raising=False)
