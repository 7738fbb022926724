"""Subprocess wrapper: the single mock seam for all tests."""

import enum
import subprocess
from dataclasses import dataclass
from typing import IO


class OutputMode(enum.Enum):
    CAPTURE = "capture"
    STREAM = "stream"


@dataclass
class Result:
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run(args: list[str], env: dict[str, str] | None = None, cwd: str | None = None) -> Result:
    """Run a command and capture output. Does not raise on non-zero exit.

    Output is decoded as UTF-8; undecodable bytes become U+FFFD.

    *env* is the complete child environment, not merged with os.environ.
    """
    proc = subprocess.run(
        args,
        capture_output=True,
        encoding="utf-8",
        errors="replace",
        env=env,
        cwd=cwd,
    )
    return Result(returncode=proc.returncode, stdout=proc.stdout, stderr=proc.stderr)


def run_streaming(
    args: list[str],
    env: dict[str, str] | None = None,
    cwd: str | None = None,
    stdout: IO | None = None,
    stderr: IO | None = None,
) -> int:
    """Run a command with output sent to *stdout*/*stderr* (inherited when None).

    Returns exit code.
    """
    proc = subprocess.run(
        args,
        env=env,
        cwd=cwd,
        stdout=stdout,
        stderr=stderr,
    )
    return proc.returncode
