from flask import current_app, has_app_context, jsonify
import os
from datetime import datetime

# outside of an app context, e.g. scripts
DEFAULT_LOG_FILE = 'logs.txt'


def log_file() -> str:
    """Log path of the current app (its LOG_FILE config)."""
    if has_app_context():
        return current_app.config.get('LOG_FILE', DEFAULT_LOG_FILE)
    return DEFAULT_LOG_FILE


def log(msg: str, level: str = 'INFO'):
    """Append '[timestamp] [LEVEL] msg' to the app's log file."""
    stamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    with open(log_file(), 'a', encoding='utf-8') as f:
        f.write(f"[{stamp}] [{level}] {msg}\n")


def read_log() -> list[str]:
    """Non-empty log lines, newest first."""
    path = log_file()
    if not os.path.exists(path):
        return []
    with open(path, 'r', encoding='utf-8') as f:
        lines = [l.rstrip('\n') for l in f if l.strip()]
    return lines[::-1]


def register(app):
    @app.route('/logs', endpoint='logs_all')
    def list_logs():
        return jsonify(read_log())

    @app.route('/logs/clear', methods=['POST'], endpoint='logs_clear')
    def clear_logs():
        """Delete the log file; the clear itself is the first new entry."""
        path = log_file()
        if os.path.exists(path):
            os.remove(path)
        log('Logs cleared')
        return jsonify({'status': 'ok'})
