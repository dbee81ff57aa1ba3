"""SQLAlchemy connection wrapper that compiles templates before execution."""

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Sequence
import pandas as pd
from sqlalchemy import create_engine
from sqlalchemy.engine.url import make_url
from sql_template import build_query, skip
from .audit import Audit, audited, retry

logger = logging.getLogger(__name__)

# Built SQL is final; no driver-side parameter interpolation
_raw = {'no_parameters': True}

# Backslash escapes in built literals are only honoured by these backends
mysql_backends = frozenset({'mysql', 'mariadb'})


class SqlCon:
    """Connection wrapper: builds SQL from templates and runs it as-is."""
    def __init__(
        self, conn: str, pool_size: int = 5, pool_timeout: int = 30,
        echo: bool = False, debug: bool = False, audit: bool = True,
        audit_db: str = 'audit.db'
    ):
        self.url = make_url(conn)
        self.db = self.url.get_backend_name()
        if self.db not in mysql_backends:
            raise ValueError(
                f"Unsupported backend '{self.db}': templates are escaped for MySQL string literals, "
                f"use one of {sorted(mysql_backends)}")
        self.debug = debug
        self.audit = audit
        self.audit_obj = Audit(audit_db) if audit else None
        self.last_sql: Optional[str] = None
        self.engine = create_engine(
            conn, pool_size=pool_size, pool_timeout=pool_timeout,
            pool_recycle=3600, echo=echo, future=True
        )

    def _log(self, sql: str):
        """Log SQL if debug enabled."""
        if self.debug:
            logger.debug(f'SQL: {sql}')

    @staticmethod
    def build_query(template: str, args: Optional[Sequence[Any]] = None) -> str:
        return build_query(template, args)

    @staticmethod
    def skip():
        return skip()

    @contextmanager
    def connect(self):
        """Context-managed connection."""
        conn = self.engine.connect()
        try:
            yield conn
        finally:
            conn.close()

    @retry()
    @audited
    def execute(self, template: str, args: Optional[Sequence[Any]] = None) -> List[Dict[str, Any]]:
        """Build the query and run it, returning rows as dicts."""
        sql = self.last_sql = build_query(template, args)
        self._log(sql)
        with self.engine.begin() as conn:
            result = conn.exec_driver_sql(sql, execution_options=_raw)
            return [dict(row) for row in result.mappings().all()] if result.returns_rows else []

    @audited
    def fetch_df(self, template: str, args: Optional[Sequence[Any]] = None) -> pd.DataFrame:
        """Build the query and return its result set as a DataFrame."""
        sql = self.last_sql = build_query(template, args)
        self._log(sql)
        with self.connect() as conn:
            result = conn.exec_driver_sql(sql, execution_options=_raw)
            return pd.DataFrame([tuple(r) for r in result.fetchall()], columns=list(result.keys()))

    def close(self):
        """Dispose of engine resources."""
        self.engine.dispose()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
