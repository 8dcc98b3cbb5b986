## healthsync/sinks.py

from __future__ import annotations
import os, json
from typing import Any, Iterable, List, Optional
import pandas as pd
from sqlalchemy import Column, MetaData, String, Table, Text, create_engine, delete, select
from sqlalchemy.engine import make_url


class KVStore:
    """JSON documents keyed by prefixed ids (``report:<id>``, ``vitals:<user>:<report>``)."""

    def __init__(self, uri: str, table: str = "kv_store"):
        url = make_url(uri)
        if url.drivername.startswith("sqlite") and url.database not in (None, "", ":memory:"):
            os.makedirs(os.path.dirname(os.path.abspath(url.database)), exist_ok=True)
        self.engine = create_engine(uri)
        self.meta = MetaData()
        self.table = Table(
            table, self.meta,
            Column("key", String(255), primary_key=True),
            Column("value", Text, nullable=False),
        )
        self.meta.create_all(self.engine)

    def set(self, key: str, value: Any):
        payload = json.dumps(value)
        with self.engine.begin() as conn:
            conn.execute(delete(self.table).where(self.table.c.key == key))
            conn.execute(self.table.insert().values(key=key, value=payload))

    def get(self, key: str) -> Optional[Any]:
        with self.engine.connect() as conn:
            row = conn.execute(select(self.table.c.value).where(self.table.c.key == key)).first()
        return json.loads(row[0]) if row else None

    def get_by_prefix(self, prefix: str) -> List[Any]:
        like = prefix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_") + "%"
        stmt = (select(self.table.c.key, self.table.c.value)
                .where(self.table.c.key.like(like, escape="\\"))
                .order_by(self.table.c.key))
        with self.engine.connect() as conn:
            rows = conn.execute(stmt).all()
        # LIKE is case-insensitive on some backends
        return [json.loads(v) for k, v in rows if k.startswith(prefix)]

    def delete(self, key: str):
        with self.engine.begin() as conn:
            conn.execute(delete(self.table).where(self.table.c.key == key))

    def count(self, prefix: str = "") -> int:
        return len(self.get_by_prefix(prefix))


def to_parquet(rows: Iterable[dict], path: str, mode: str = "append"):
    df = pd.DataFrame(list(rows))
    if mode == "overwrite" or not os.path.exists(path):
        df.to_parquet(path, index=False)
    else:
        old = pd.read_parquet(path)
        pd.concat([old, df], ignore_index=True).to_parquet(path, index=False)
