from __future__ import annotations
import os

COMMENT_PREFIX = "//"
DEBUG = os.environ.get("START_DEBUG", "").strip().lower() in ("1", "true", "yes")
SCRIPT_ENCODING = os.environ.get("START_SCRIPT_ENCODING", "utf-8-sig")
