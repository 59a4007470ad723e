import os
from pathlib import Path

APP_TITLE = "Store Editor"

CACHE_DIR = Path.home() / ".storeeditor"
DB_PATH = Path(os.environ.get("STOREEDITOR_DB") or (CACHE_DIR / "store.db"))

JSON_INDENT = 2

PROJECT_ROOT = Path(__file__).resolve().parents[2]  # storeeditor/
ASSETS_DIR = PROJECT_ROOT / "assets"
LOGO_PATH = ASSETS_DIR / "store-logo.png"

PAGE_ICON = str(LOGO_PATH) if LOGO_PATH.exists() else "🗄️"
