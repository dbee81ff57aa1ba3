"""Audit logging and retry decorators for executed templates."""

import sqlite3
import logging
import time
import functools
from threading import Lock
from typing import Optional
from sqlalchemy.exc import OperationalError, InterfaceError

logger = logging.getLogger(__name__)


class Audit:
    """Records executed templates in an SQLite database."""
    def __init__(self, db: str = 'audit.db'):
        self.db = db
        self.lock = Lock()
        self._init()

    def _init(self):
        """Create the audit table."""
        with self.lock, sqlite3.connect(self.db) as conn:
            conn.execute('''
                CREATE TABLE IF NOT EXISTS audit (
                    id INTEGER PRIMARY KEY,
                    ts TEXT DEFAULT CURRENT_TIMESTAMP,
                    fn TEXT,
                    template TEXT,
                    arg_count INTEGER,
                    sql TEXT,
                    ok INTEGER,
                    err TEXT
                )
            ''')

    def log(self, fn: str, template: str, arg_count: int, sql: Optional[str], ok: bool, err: Optional[str]):
        with self.lock, sqlite3.connect(self.db) as conn:
            conn.execute('''
                INSERT INTO audit (fn, template, arg_count, sql, ok, err)
                VALUES (?, ?, ?, ?, ?, ?)
            ''', (fn, template, arg_count, sql, int(ok), err))

    def entries(self):
        """Return audit rows oldest first."""
        with self.lock, sqlite3.connect(self.db) as conn:
            conn.row_factory = sqlite3.Row
            return [dict(r) for r in conn.execute('SELECT * FROM audit ORDER BY id')]


def audited(fn):
    """Audit a method called as fn(self, template, args=None)."""
    @functools.wraps(fn)
    def wrapper(self, template, args=None, **kwargs):
        arg_count = len(args) if args is not None else 0
        self.last_sql = None
        try:
            result = fn(self, template, args, **kwargs)
        except Exception as e:
            if self.audit:
                self.audit_obj.log(fn.__name__, template, arg_count, self.last_sql, False, str(e))
            raise
        if self.audit:
            self.audit_obj.log(fn.__name__, template, arg_count, self.last_sql, True, None)
        return result
    return wrapper


def retry(tries: int = 3, delay: float = 2.0):
    """Retry on connection level database errors."""
    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            for attempt in range(1, tries + 1):
                try:
                    return fn(*args, **kwargs)
                except (OperationalError, InterfaceError) as e:
                    if attempt == tries:
                        raise
                    logger.warning(f'{fn.__name__} retry {attempt}/{tries} - {e}')
                    time.sleep(delay)
        return wrapper
    return decorator
