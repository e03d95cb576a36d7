#!/usr/bin/env python3
"""
Create the employees schema using DATABASE_URL from config.
No psql needed. From backend/: python scripts/init_db.py
"""
from __future__ import annotations

import os
import sys

_script_dir = os.path.dirname(os.path.abspath(__file__))
_backend = os.path.dirname(_script_dir)
if _backend not in sys.path:
    sys.path.insert(0, _backend)

from app.core.config import get_settings
from app.core.logging_config import setup_logging
from app.db.session import init_db


def main() -> int:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    init_db()
    print("OK: employees schema created")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        print(f"FAIL: {e}", file=sys.stderr)
        sys.exit(1)
