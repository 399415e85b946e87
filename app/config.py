import os
import tempfile

# Configuration

STORAGE_FILE = "motd_storage.json"
DEFAULT_STORAGE_PATH = os.path.join(tempfile.gettempdir(), STORAGE_FILE)
STORAGE_PATH = os.getenv("MOTD_STORAGE_PATH", "")

INITIAL_MESSAGE = "quidquid Latine dictum sit altum videtur"

STATIC_DIR = os.path.abspath(os.getenv("MOTD_STATIC_DIR", "static"))

HOST = os.getenv("MOTD_HOST", "0.0.0.0")
PORT = int(os.getenv("MOTD_PORT", "8080"))

LOG_LEVEL = os.getenv("MOTD_LOG_LEVEL", "INFO")

# used by cli.py and tests.py
SERVER_URL = os.getenv("MOTD_URL", "http://127.0.0.1:8080")
