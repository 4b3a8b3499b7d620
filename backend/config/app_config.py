"""
Application Configuration

Reads runtime settings from environment variables.

Includes:
- Database URL and SQL echo flag
- Log directory and level
- Bind host and port for the uvicorn server
"""
import os
from pathlib import Path


def _env_flag(name: str, default: str = 'false') -> bool:
    """
    Read a boolean flag from the environment.

    Returns:
        True if the variable is set to 'true', '1' or 'yes' (case-insensitive)
    """
    return os.environ.get(name, default).lower() in ('true', '1', 'yes')


DATABASE_URL = os.environ.get('EMPLOYEES_DATABASE_URL', 'sqlite+aiosqlite:///./employees.db')
SQL_ECHO = _env_flag('EMPLOYEES_SQL_ECHO')

LOG_DIR = Path(os.environ.get('EMPLOYEES_LOG_DIR', './logs'))
LOG_LEVEL = os.environ.get('EMPLOYEES_LOG_LEVEL', 'INFO').upper()

HOST = os.environ.get('EMPLOYEES_HOST', '0.0.0.0')
PORT = int(os.environ.get('EMPLOYEES_PORT', '8000'))
