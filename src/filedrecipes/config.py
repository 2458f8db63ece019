from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import codecs
import logging
import os
import tomllib
from typing import Any

from .errors import ConfigError


NEWLINES = {"lf": "\n", "crlf": "\r\n"}
LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

DEFAULTS: dict[str, Any] = {
    "recipes_file": "recipes.txt",
    "encoding": "utf-8",
    "newline": "lf",
    "log_level": "warning",
}


@dataclass(frozen=True)
class EffectiveConfig:
    recipes_file: str
    encoding: str
    newline: str
    log_level: str
    project_dir: str

    @property
    def line_terminator(self) -> str:
        return NEWLINES[self.newline]

    @property
    def recipes_path(self) -> Path:
        path = Path(self.recipes_file).expanduser()
        if path.is_absolute():
            return path
        return Path(self.project_dir) / path


def _config_root() -> Path:
    return Path(os.path.expanduser("~/.config/filedrecipes"))


def load_global_config() -> dict[str, Any]:
    path = _config_root() / "config.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def load_project_config(project_dir: str) -> dict[str, Any]:
    path = Path(project_dir) / "filedrecipes.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f"Failed to read config: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config: {path}") from exc


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def merge_config(cli: dict[str, Any], project: dict[str, Any], global_cfg: dict[str, Any]) -> dict[str, Any]:
    merged = _deep_merge(DEFAULTS, global_cfg)
    merged = _deep_merge(merged, project)
    return _deep_merge(merged, cli)


def resolve_config(cli_args: dict[str, Any]) -> EffectiveConfig:
    global_cfg = load_global_config()
    project_dir = cli_args.get("project") or os.getcwd()
    project_cfg = load_project_config(project_dir)

    merged = merge_config(_cli_to_dict(cli_args), project_cfg, global_cfg)

    recipes_file = str(merged.get("recipes_file") or "").strip()
    if not recipes_file:
        raise ConfigError("recipes_file must not be empty (set in config or via --file)")

    return EffectiveConfig(
        recipes_file=recipes_file,
        encoding=_normalize_encoding(merged.get("encoding")),
        newline=_normalize_newline(merged.get("newline")),
        log_level=_normalize_log_level(merged.get("log_level")),
        project_dir=str(project_dir),
    )


def _cli_to_dict(cli_args: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key in ("recipes_file", "encoding", "newline", "log_level"):
        if cli_args.get(key) is not None:
            out[key] = cli_args[key]
    return out


def config_to_toml(cfg: EffectiveConfig) -> str:
    lines = [
        f"recipes_file = {cfg.recipes_file!r}",
        f"encoding = {cfg.encoding!r}",
        f"newline = {cfg.newline!r}",
        f"log_level = {cfg.log_level!r}",
    ]
    return "\n".join(lines) + "\n"


def _normalize_encoding(value: Any) -> str:
    text = str(value or DEFAULTS["encoding"]).strip()
    try:
        codecs.lookup(text)
    except LookupError as exc:
        raise ConfigError(f"Unknown encoding: {value!r}") from exc
    return text


def _normalize_newline(value: Any) -> str:
    text = str(value or "").strip().lower()
    if text not in NEWLINES:
        raise ConfigError(f"newline must be one of {', '.join(sorted(NEWLINES))}, got {value!r}")
    return text


def _normalize_log_level(value: Any) -> str:
    text = str(value or "").strip().lower()
    if text in LOG_LEVELS:
        return text
    return "warning"
