"""Load node/npm locations and registry into a Settings object."""

import os
from dataclasses import dataclass

import yaml

from npmctl.errors import ConfigError

DEFAULT_REGISTRY = "https://registry.npmjs.org/"
CONFIG_FILE = "npmctl.yml"

_ENV_KEYS = {
    "root": "NPMCTL_ROOT",
    "node": "NPMCTL_NODE",
    "npm": "NPMCTL_NPM",
    "registry": "NPMCTL_REGISTRY",
}


@dataclass(frozen=True)
class Settings:
    root_path: str
    node_path: str
    npm_path: str
    registry: str = DEFAULT_REGISTRY

    @property
    def node_modules(self) -> str:
        return os.path.join(self.root_path, "node_modules")

    @property
    def cache_dir(self) -> str:
        return os.path.join(self.root_path, ".npm-cache")

    @property
    def package_lock(self) -> str:
        return os.path.join(self.root_path, "package-lock.json")

    @property
    def node_dir(self) -> str:
        return os.path.dirname(self.node_path)


def _read_file(path: str | None) -> dict:
    """Read the YAML config file. An absent default file is an empty config."""
    if path is None:
        if not os.path.isfile(CONFIG_FILE):
            return {}
        path = CONFIG_FILE
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid config {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"invalid config {path}: expected a mapping")
    return data


def _env_overrides() -> dict[str, str]:
    """Read NPMCTL_* environment overrides, skipping empty values."""
    overrides: dict[str, str] = {}
    for key, var in _ENV_KEYS.items():
        if os.environ.get(var):
            overrides[key] = os.environ[var]
    return overrides


def load_settings(path: str | None = None, overrides: dict | None = None) -> Settings:
    """Build Settings from config file, environment and explicit overrides.

    Precedence: *overrides* → NPMCTL_* env → config file → defaults.
    Keys: root, node, npm, registry. None values in *overrides* are ignored.
    """
    values = dict(_read_file(path))
    values.update(_env_overrides())
    values.update({k: v for k, v in (overrides or {}).items() if v is not None})

    missing = [k for k in ("node", "npm") if not values.get(k)]
    if missing:
        raise ConfigError(f"missing settings: {', '.join(missing)}")

    return Settings(
        root_path=os.path.abspath(values.get("root") or os.getcwd()),
        node_path=os.path.abspath(values["node"]),
        npm_path=os.path.abspath(values["npm"]),
        registry=values.get("registry") or DEFAULT_REGISTRY,
    )
