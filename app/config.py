from __future__ import annotations

import os
from pathlib import Path
from typing import Optional


BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_POSTS_DIR = BASE_DIR / "posts"
POSTS_DIR = Path(os.getenv("POSTBOOK_POSTS_DIR", str(DEFAULT_POSTS_DIR))).expanduser()
POSTS_PER_PAGE = int(os.getenv("POSTBOOK_POSTS_PER_PAGE", "10"))
LOG_LEVEL = os.getenv("POSTBOOK_LOG_LEVEL", "INFO")
DEFAULT_CODE_LANGUAGE: Optional[str] = os.getenv("POSTBOOK_DEFAULT_CODE_LANGUAGE") or None
