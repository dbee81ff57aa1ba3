import pytest
import sqlalchemy

import sqlcon.conn
from sqlcon import SqlCon

MYSQL_URL = 'mysql+pymysql://tester@localhost/sqltemplate'


@pytest.fixture
def sqlite_backend(tmp_path, monkeypatch):
    """Back a MySQL-configured SqlCon with a local SQLite file.

    SQLite ignores backslash escapes, so tests using this fixture only pass
    quote-free string values.
    """
    path = tmp_path / 'data.db'
    monkeypatch.setattr(sqlcon.conn, 'create_engine',
                        lambda url, **kwargs: sqlalchemy.create_engine(f'sqlite:///{path}'))
    return path


@pytest.fixture
def con(tmp_path, sqlite_backend):
    db = SqlCon(MYSQL_URL, audit_db=str(tmp_path / 'audit.db'))
    db.execute('CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT, active INTEGER)')
    yield db
    db.close()
