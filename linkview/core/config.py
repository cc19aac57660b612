import os
from pathlib import Path
from dotenv import dotenv_values

ROOT = Path(__file__).resolve().parents[2]
ENV = dotenv_values(ROOT / ".env") if (ROOT / ".env").exists() else {}

DEFAULT_HOST = "localhost"
DEFAULT_PORT = "8008"
DEFAULT_PATH = "/LIVE"
DEFAULT_SCHEME = "http"

def get(key: str, default=None):
    value = os.environ.get(key)
    if value is not None:
        return value
    return ENV.get(key, default)

def endpoint() -> str:
    full = get("LINKVIEW_ENDPOINT")
    if full:
        return full
    scheme = get("LINKVIEW_SCHEME") or DEFAULT_SCHEME
    host = get("LINKVIEW_HOST") or DEFAULT_HOST
    port = get("LINKVIEW_PORT") or DEFAULT_PORT
    path = get("LINKVIEW_PATH") or DEFAULT_PATH
    if not path.startswith("/"):
        path = "/" + path
    return f"{scheme}://{host}:{port}{path}"

def log_level() -> str:
    if str(get("DEBUG") or "").lower() == "true":
        return "DEBUG"
    return get("LINKVIEW_LOG_LEVEL") or "INFO"
