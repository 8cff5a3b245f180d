"""
Application configuration and paths.
"""
import os
from pathlib import Path

# Application identity
APP_NAME = 'TalkyTracker'
APP_VERSION = '0.1.0'

# Server configuration
SERVER_HOST = os.environ.get('SERVER_HOST', '127.0.0.1')
SERVER_PORT = int(os.environ.get('SERVER_PORT', '5111'))

# Paths
SCRIPT_DIR = Path(__file__).parent.parent

# Data directory (database lives here unless DATABASE_URL points elsewhere)
DATA_DIR = Path(os.environ.get('DATA_DIR', Path.home() / '.local' / 'share' / 'talky-tracker'))

# Database configuration
DATABASE_PATH = DATA_DIR / 'tts_jobs.db'
DATABASE_URL = os.environ.get('DATABASE_URL', f'sqlite+aiosqlite:///{DATABASE_PATH}')

# Header set by the upstream session provider once it has authenticated the user
AUTH_USER_HEADER = os.environ.get('AUTH_USER_HEADER', 'X-User-Id')

# Pagination
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


def ensure_directories():
    """Create required directories if they don't exist."""
    DATA_DIR.mkdir(parents=True, exist_ok=True)
