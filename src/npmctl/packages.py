"""Package operations: run npm and decode what it prints."""

import json
import os
from dataclasses import dataclass

from npmctl import log, npm, process
from npmctl.config import Settings
from npmctl.errors import CommandError

_DEBUG_HINT = f"Try running again with {npm.DEBUG_ENV}=info to see more output."


@dataclass
class Package:
    name: str
    version: str


def _with_hint(summary: str, result: process.Result) -> CommandError:
    message = f"{summary} \n{result.stderr}\n{_DEBUG_HINT}"
    return CommandError(message, stderr=result.stderr, returncode=result.returncode)


def packages(settings: Settings) -> list[Package]:
    """Return the top-level packages installed under the project root.

    Any failure, including unparsable output, is reported with npm's stderr.
    """
    result = npm.exec_npm(settings, "list", "--json", "--depth=0")
    if not result.ok:
        raise CommandError(result.stderr, stderr=result.stderr, returncode=result.returncode)
    try:
        response = json.loads(result.stdout)
        dependencies = response.get("dependencies") or {}
        return [
            Package(name=name, version=dep.get("version") or "")
            for name, dep in dependencies.items()
        ]
    except (json.JSONDecodeError, AttributeError) as e:
        log.debug(f"npm list output not decodable: {e}")
        raise CommandError(result.stderr, stderr=result.stderr, returncode=result.returncode) from e


def install_packages(settings: Settings, *names: str) -> None:
    result = npm.exec_npm(settings, "install", "--force", *names)
    if not result.ok:
        raise _with_hint("Error installing package.", result)


def rebuild_packages(settings: Settings) -> None:
    result = npm.exec_npm(settings, "rebuild")
    if not result.ok:
        raise _with_hint("Error rebuilding packages.", result)


def remove_packages(settings: Settings, *names: str) -> None:
    result = npm.exec_npm(settings, "remove", *names)
    if not result.ok:
        raise CommandError(result.stderr, stderr=result.stderr, returncode=result.returncode)


def outdated_packages(settings: Settings, *names: str) -> dict[str, str]:
    """Map each outdated package to its latest version.

    npm outdated exits 1 whenever something is outdated, so only a
    non-zero exit with stderr output counts as failure. Output that is not
    JSON yields an empty mapping.
    """
    # Spawn failures raise LaunchError from exec_npm; the empty-stderr rule
    # below only applies once npm has actually run.
    result = npm.exec_npm(settings, "outdated", "--json", *names)
    if not result.ok and result.stderr:
        raise CommandError(result.stderr, stderr=result.stderr, returncode=result.returncode)

    try:
        outdated = json.loads(result.stdout)
    except json.JSONDecodeError as e:
        if result.stdout:
            log.debug(f"npm outdated output not decodable: {e}")
        return {}
    if not isinstance(outdated, dict):
        log.debug("npm outdated output is not an object")
        return {}

    latest = {}
    for name, versions in outdated.items():
        if isinstance(versions, dict):
            latest[name] = versions.get("Latest") or ""
        else:
            latest[name] = ""
    return latest


def clear_cache(settings: Settings) -> None:
    """Run npm cache clean with output streamed to the terminal."""
    result = npm.exec_npm(settings, "cache", "clean", mode=process.OutputMode.STREAM)
    if not result.ok:
        raise CommandError(f"exit status {result.returncode}", returncode=result.returncode)


def remove_package_lock(settings: Settings) -> None:
    """Delete package-lock.json. Raises FileNotFoundError when there is none."""
    os.remove(settings.package_lock)
