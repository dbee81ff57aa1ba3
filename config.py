"""Runtime configuration read from the environment."""

import os

DB_CONFIG = {
    'conn_str': os.environ.get('SQLTEMPLATE_CONN_STR', 'mysql+pymysql://root@localhost:3306/sqltemplate'),
    'audit_db': os.environ.get('SQLTEMPLATE_AUDIT_DB', 'audit.db'),
    'debug': os.environ.get('SQLTEMPLATE_DEBUG', '').lower() in ('1', 'true', 'yes'),
}
