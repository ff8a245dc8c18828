"""Configuration loader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

import yaml
from dotenv import load_dotenv

from .errors import ConfigError

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path("~/.toastr").expanduser()
ENV_FILE_NAME = ".env"
CHANNELS_FILE = "channels.yaml"
DEFAULT_PREFIXES: Tuple[str, ...] = ("!", "@Toastr_Bot ")
DEFAULT_STORE_NAMESPACE = "twitch"


@dataclass
class Config:
    bot_username: str
    channels: List[str] = field(default_factory=list)
    roles: Tuple[str, ...] = ()
    default_prefixes: Tuple[str, ...] = DEFAULT_PREFIXES
    store_namespace: str = DEFAULT_STORE_NAMESPACE
    config_dir: Path | None = None


def resolve_config_dir(config_dir: Path | str | None) -> Path:
    """Resolve and validate the directory containing .env + channels.yaml."""
    target = (
        Path(config_dir).expanduser() if config_dir else DEFAULT_CONFIG_DIR
    ).resolve()
    if not target.exists():
        raise ConfigError(
            f"Config directory {target} does not exist. "
            "Create it and add .env and channels.yaml."
        )
    if not target.is_dir():
        raise ConfigError(f"Config directory {target} is not a directory")
    return target


def load_config(config_dir: Path | str | None = None) -> Config:
    """Load Toastr configuration from the provided or default directory."""
    root = resolve_config_dir(config_dir)
    _load_env_file(root / ENV_FILE_NAME)

    data = _load_channels_file(root / CHANNELS_FILE)
    channels = _select_channels(_as_str_list(data.get("channels"), "channels"))
    roles = tuple(_as_str_list(data.get("roles"), "roles"))

    raw_prefixes = data.get("default_prefixes")
    if raw_prefixes is None:
        prefixes = DEFAULT_PREFIXES
    else:
        prefixes = tuple(_as_str_list(raw_prefixes, "default_prefixes"))
        if not prefixes:
            raise ConfigError("default_prefixes must contain at least one prefix")

    return Config(
        bot_username=_require_env("BOT_USERNAME"),
        channels=channels,
        roles=roles,
        default_prefixes=prefixes,
        store_namespace=str(data.get("store_namespace") or DEFAULT_STORE_NAMESPACE),
        config_dir=root,
    )


def _load_env_file(path: Path) -> None:
    if not path.exists():
        LOGGER.warning("No .env file found at %s; relying on shell environment.", path)
        return
    load_dotenv(dotenv_path=path, override=False)


def _require_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise ConfigError(f"{name} is not set")
    return value


def _load_channels_file(path: Path) -> dict:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigError(f"{CHANNELS_FILE} not found at {path}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid {CHANNELS_FILE} structure at {path}")
    return data


def _as_str_list(value, key: str) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError(f"{key} must be a list")
    return [str(item) for item in value]


def _select_channels(all_channels: List[str]) -> List[str]:
    raw = (os.getenv("TOASTR_CHANNELS") or "").strip()
    if not raw:
        if not all_channels:
            LOGGER.warning("No channels configured")
        return all_channels

    requested = [name.strip() for name in raw.split(",") if name.strip()]
    missing = [name for name in requested if name not in all_channels]
    if missing:
        raise ConfigError(
            "Unknown channel(s) requested via TOASTR_CHANNELS: "
            + ", ".join(missing)
        )
    return requested
