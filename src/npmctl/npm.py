"""Build and run npm invocations inside the isolated environment."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import IO

from npmctl import process
from npmctl.config import Settings
from npmctl.environment import build_environ
from npmctl.errors import LaunchError

DEBUG_ENV = "NPMCTL_DEBUG"
PREPEND_NODE_PATH = "--scripts-prepend-node-path=true"


@dataclass(frozen=True)
class Invocation:
    args: list[str]
    cwd: str
    env: dict[str, str]


def debug_level(environ: Mapping[str, str] | None = None) -> str | None:
    """Return the NPMCTL_DEBUG value when it turns debug mode on, else None.

    "", "0" and "false" leave debug mode off.
    """
    if environ is None:
        environ = os.environ
    level = environ.get(DEBUG_ENV, "")
    if level in ("", "0", "false"):
        return None
    return level


def debugging(environ: Mapping[str, str] | None = None) -> bool:
    return debug_level(environ) is not None


def output_mode(environ: Mapping[str, str] | None = None) -> process.OutputMode:
    """Stream npm output live in debug mode, capture it otherwise."""
    if debugging(environ):
        return process.OutputMode.STREAM
    return process.OutputMode.CAPTURE


def ensure_node_modules(settings: Settings) -> None:
    """Create <root>/node_modules if missing. Safe to call repeatedly."""
    try:
        os.makedirs(settings.node_modules, mode=0o755, exist_ok=True)
    except OSError as e:
        raise LaunchError(f"cannot create {settings.node_modules}: {e}") from e


def _relative(path: str, root: str) -> str:
    try:
        return os.path.relpath(path, root)
    except ValueError as e:
        raise LaunchError(f"cannot make {path} relative to {root}: {e}") from e


def npm_command(
    settings: Settings, *args: str, environ: Mapping[str, str] | None = None
) -> Invocation:
    """Describe an npm invocation: argv, working directory and environment.

    Node and npm are addressed relative to the project root because npm
    runs with the root as its working directory.
    """
    ensure_node_modules(settings)
    node = _relative(settings.node_path, settings.root_path)
    npm = _relative(settings.npm_path, settings.root_path)

    argv = [node, npm, PREPEND_NODE_PATH, *args]
    level = debug_level(environ)
    if level is not None:
        argv.append(f"--loglevel={level}")

    return Invocation(args=argv, cwd=settings.root_path, env=build_environ(settings, environ))


def exec_npm(
    settings: Settings,
    *args: str,
    mode: process.OutputMode | None = None,
    stdout: IO | None = None,
    stderr: IO | None = None,
) -> process.Result:
    """Run npm and return its exit code with captured output.

    *mode* defaults to output_mode(). In stream mode npm writes to
    *stdout*/*stderr* (the caller's own streams when None) and the
    returned stdout/stderr are empty. Exit codes are not interpreted here.
    """
    if mode is None:
        mode = output_mode()
    inv = npm_command(settings, *args)
    try:
        if mode is process.OutputMode.STREAM:
            code = process.run_streaming(
                inv.args, env=inv.env, cwd=inv.cwd, stdout=stdout, stderr=stderr
            )
            return process.Result(returncode=code, stdout="", stderr="")
        return process.run(inv.args, env=inv.env, cwd=inv.cwd)
    except OSError as e:
        raise LaunchError(f"cannot start {inv.args[0]}: {e}") from e
