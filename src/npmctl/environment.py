"""Isolated child environment for npm: private cache, fixed registry, node first on PATH."""

import os
from collections.abc import Mapping

from npmctl.config import Settings


def split_path(environ: Mapping[str, str]) -> tuple[dict[str, str], str]:
    """Return (environ without PATH, PATH value).

    The name match is case-insensitive, so Windows-style ``Path`` is found
    too. Every match is dropped; the first one supplies the value.
    """
    rest: dict[str, str] = {}
    path = None
    for key, value in environ.items():
        if key.upper() == "PATH":
            if path is None:
                path = value
            continue
        rest[key] = value
    return rest, path or ""


def prepend_path(new_path: str, path_list: str) -> str:
    # Joined even when path_list is empty, leaving a trailing separator.
    return new_path + os.pathsep + path_list


def overrides(settings: Settings) -> dict[str, str]:
    """npm_config_* values forced on every invocation."""
    return {
        "npm_config_always_auth": "false",
        "npm_config_cache": settings.cache_dir,
        "npm_config_registry": settings.registry,
        "npm_config_global": "false",
        "npm_config_onload_script": "false",
        "npm_config_audit": "false",
    }


def build_environ(settings: Settings, environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Build a fresh environment for an npm subprocess.

    The ambient environment (``os.environ`` by default) is copied, never
    mutated. Its PATH is replaced by one that starts with the directory of
    the node executable, and the npm_config overrides come last.
    """
    if environ is None:
        environ = os.environ
    env, path = split_path(environ)
    forced = overrides(settings)
    for key in forced:
        env.pop(key, None)
    env["PATH"] = prepend_path(settings.node_dir, path)
    env.update(forced)
    return env
