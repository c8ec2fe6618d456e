"""Settings from environment (.env at project root is loaded on import)."""
import os
from pathlib import Path
from dotenv import load_dotenv
from wordpane_audit.reader import DEFAULT_TAIL_LINES

# Load .env from project root (parent of wordpane_audit/) so it works when run as python -m wordpane_audit
_project_root = Path(__file__).resolve().parent.parent
load_dotenv(_project_root / ".env")

LOG_FILE_NAME = "wordpane-audit.log"
DEFAULT_CONTENT_DIR = "wp-content"


def get_content_dir() -> Path:
    """Host content-storage root (WORDPANE_CONTENT_DIR)."""
    return Path(os.getenv("WORDPANE_CONTENT_DIR") or DEFAULT_CONTENT_DIR)


def get_log_file() -> Path:
    """Full path of the audit log. WORDPANE_AUDIT_LOG overrides the content-dir location."""
    override = (os.getenv("WORDPANE_AUDIT_LOG") or "").strip()
    if override:
        return Path(override)
    return get_content_dir() / LOG_FILE_NAME


def get_tail_default() -> int:
    """Default window for `last` (WORDPANE_TAIL_DEFAULT); falls back to DEFAULT_TAIL_LINES on junk values."""
    raw = (os.getenv("WORDPANE_TAIL_DEFAULT") or "").strip()
    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_TAIL_LINES
    return value if value > 0 else DEFAULT_TAIL_LINES
