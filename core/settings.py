from __future__ import annotations

from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parents[1]
STATIC_DIR = ROOT_DIR / "web"

SERVER_HOST = "0.0.0.0"
SERVER_PORT = 3000
