"""Exception types raised by npmctl operations."""


class NpmError(RuntimeError):
    """Base class for every npmctl failure."""


class ConfigError(NpmError):
    """Settings could not be assembled."""


class LaunchError(NpmError):
    """npm was never run: node_modules, path resolution or spawn failed."""


class CommandError(NpmError):
    """npm ran and failed, or its output could not be decoded."""

    def __init__(self, message: str, stderr: str = "", returncode: int | None = None):
        super().__init__(message)
        self.stderr = stderr
        self.returncode = returncode
