"""Timestamped output + GitHub Actions formatting."""

import os
import sys
from datetime import datetime

from npmctl.npm import debugging


def _timestamp() -> str:
    return datetime.now().strftime("%H:%M:%S")


def _is_github_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS") == "true"


def info(msg: str) -> None:
    print(f"[{_timestamp()}] {msg}", flush=True)


def success(msg: str) -> None:
    info(f"  ✓ {msg}")


def error(msg: str) -> None:
    if _is_github_actions():
        print(f"::error::{msg}", flush=True)
    print(f"[{_timestamp()}] ERROR: {msg}", file=sys.stderr, flush=True)


def debug(msg: str) -> None:
    """Diagnostics on stderr, only while NPMCTL_DEBUG is on."""
    if not debugging():
        return
    if _is_github_actions():
        print(f"::debug::{msg}", flush=True)
    print(f"[{_timestamp()}] DEBUG: {msg}", file=sys.stderr, flush=True)
