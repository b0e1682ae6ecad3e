"""Configuration data structures and loading.

Provides immutable configuration loaded from ~/.gitauto/config.toml
(or the file named by the GITAUTO_CONFIG environment variable).

Example config:
  remote = "upstream"
  repo_visibility = "private"
  log_count = 10
  clone_depth = 1
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_ENV_VAR = "GITAUTO_CONFIG"
REPO_VISIBILITIES = ("public", "private", "internal")


@dataclass(frozen=True)
class GitAutoConfig:
    """Immutable configuration data.

    Loaded once at CLI entry point and stored in GitAutoContext.
    """

    remote: str = "origin"
    repo_visibility: str = "public"
    log_count: int = 5
    clone_depth: int = 1


def config_path() -> Path:
    """Get the path to the config file.

    Returns:
        Path from GITAUTO_CONFIG if set, else ~/.gitauto/config.toml
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".gitauto" / "config.toml"


def _positive_int(data: dict, key: str, default: int, path: Path) -> int:
    value = data.get(key, default)
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"'{key}' must be a positive integer in {path}, got {value!r}")
    return value


def load_config(path: Path | None = None) -> GitAutoConfig:
    """Load config from disk if present; otherwise return defaults.

    Args:
        path: Config file path (defaults to config_path())

    Returns:
        GitAutoConfig instance with loaded values

    Raises:
        ValueError: If the file is malformed or holds invalid values
    """
    cfg_path = path if path is not None else config_path()
    if not cfg_path.exists():
        return GitAutoConfig()

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Malformed config file {cfg_path}: {e}") from e

    defaults = GitAutoConfig()

    remote = str(data.get("remote", defaults.remote)).strip()
    if not remote:
        raise ValueError(f"'remote' cannot be empty in {cfg_path}")

    visibility = str(data.get("repo_visibility", defaults.repo_visibility)).lower()
    if visibility not in REPO_VISIBILITIES:
        allowed = ", ".join(REPO_VISIBILITIES)
        raise ValueError(
            f"'repo_visibility' must be one of {allowed} in {cfg_path}, got {visibility!r}"
        )

    return GitAutoConfig(
        remote=remote,
        repo_visibility=visibility,
        log_count=_positive_int(data, "log_count", defaults.log_count, cfg_path),
        clone_depth=_positive_int(data, "clone_depth", defaults.clone_depth, cfg_path),
    )
