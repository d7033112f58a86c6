from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List

import mysql.connector

from .connection import DBConfig

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"

_COMMENT_LINE = re.compile(r"(?m)^\s*--.*$")


@contextmanager
def _server_connection(target: DBConfig, *, with_database: bool = True):
    options = dict(host=target.host, port=target.port, user=target.user, password=target.password, use_pure=True)
    if with_database:
        options["database"] = target.database
    conn = mysql.connector.connect(**options)
    try:
        yield conn
    finally:
        conn.close()


def split_statements(sql: str) -> Iterator[str]:
    """Yield the statements of a DDL script.

    Comment lines are dropped and statements are split on ``;`` outside of
    quoted literals.
    """

    buf: List[str] = []
    quote = ""
    for ch in _COMMENT_LINE.sub("", sql):
        if quote:
            if ch == quote:
                quote = ""
        elif ch in ("'", '"', "`"):
            quote = ch
        elif ch == ";":
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue
        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    with _server_connection(target, with_database=False) as conn:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()


def apply_schema(db_config: dict, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    """Create the database and the row-store tables if they are missing."""

    ensure_database_exists(db_config)
    statements = list(split_statements(Path(schema_path).read_text(encoding="utf-8")))

    with _server_connection(DBConfig.from_dict(db_config)) as conn:
        cur = conn.cursor()
        for stmt in statements:
            cur.execute(stmt)
        conn.commit()

    logger.info("Applied %d schema statements from %s", len(statements), Path(schema_path).name)


def list_tables(db_config: dict) -> list[str]:
    with _server_connection(DBConfig.from_dict(db_config)) as conn:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
