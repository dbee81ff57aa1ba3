"""Flask app for building and executing SQL templates."""

from flask import Flask, request, jsonify, Response, g
from typing import Any, Dict, List
import logging
from sql_template import build_query, skip
from sqlcon import SqlCon
from config import DB_CONFIG

app = Flask(__name__)
logger = logging.getLogger(__name__)

# JSON stand-in for the skip sentinel
SKIP_MARKER = {'$skip': True}


def get_db() -> SqlCon:
    """Get or create SqlCon instance in Flask context."""
    if 'db' not in g:
        g.db = SqlCon(DB_CONFIG['conn_str'], debug=DB_CONFIG.get('debug', False),
                      audit_db=DB_CONFIG.get('audit_db', 'audit.db'))
    return g.db


def decode_args(raw: Any) -> List[Any]:
    """Turn the JSON argument list into template arguments."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError('args must be a JSON array')
    return [skip() if a == SKIP_MARKER else a for a in raw]


def validate_payload(payload: Any) -> Dict[str, Any]:
    """Check the request body has a template and decode its args."""
    if not isinstance(payload, dict):
        raise ValueError('Request body must be a JSON object')
    if not isinstance(payload.get('template'), str):
        raise ValueError("Missing required field: 'template'")
    return {'template': payload['template'], 'args': decode_args(payload.get('args'))}


@app.errorhandler(ValueError)
def handle_value_error(e: ValueError) -> Response:
    """Handle ValueError (including template errors) with 400 response."""
    return jsonify({'error': str(e), 'type': type(e).__name__}), 400


@app.errorhandler(Exception)
def handle_general_error(e: Exception) -> Response:
    """Handle unexpected errors with 500 response."""
    logger.error(f'Server error: {e}')
    return jsonify({'error': 'Internal server error'}), 500


@app.route('/query/build', methods=['POST'])
def build():
    """Compile a template into SQL without running it."""
    payload = validate_payload(request.get_json(silent=True))
    return jsonify({'sql': build_query(payload['template'], payload['args'])})


@app.route('/query/execute', methods=['POST'])
def execute():
    """Compile a template and execute it."""
    payload = validate_payload(request.get_json(silent=True))
    con = get_db()
    rows = con.execute(payload['template'], payload['args'])
    return jsonify({'sql': con.last_sql, 'result': rows})


@app.teardown_appcontext
def close_db(error):
    """Close SqlCon instance on app context teardown."""
    if 'db' in g:
        g.pop('db').close()


if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG if DB_CONFIG.get('debug') else logging.INFO)
    app.run()
