from pathlib import Path
import os
from dotenv import load_dotenv

# Load .env from project root (one level above /localbiz)
BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")

DATABASE_URL = os.getenv("DATABASE_URL", "")
if not DATABASE_URL:
    raise RuntimeError("DATABASE_URL not set. Put it in project_root/.env")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
# also write log records here when set
LOG_FILE = os.getenv("LOG_FILE") or None

# comma separated; defaults to the Vite dev server
CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173").split(",")
    if o.strip()
]
