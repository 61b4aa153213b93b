from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv

from tapevm.schemas import VMSettings

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def repo_root() -> Path:
    # Project root is the directory that contains the `tapevm/` package.
    return Path(__file__).resolve().parents[1]


def load_env() -> None:
    # Prefer a project-local `.env`; fall back to searching from CWD.
    root_env = repo_root() / ".env"
    env_path = str(root_env) if root_env.exists() else (find_dotenv(usecwd=True) or str(root_env))
    load_dotenv(env_path)


def _parse_bool(name: str, raw: str) -> bool:
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (got {raw!r})")


def _settings_from_env() -> dict[str, Any]:
    out: dict[str, Any] = {}
    eof = (os.getenv("TAPEVM_EOF_POLICY") or "").strip().lower()
    if eof:
        out["eof_policy"] = eof
    banner = os.getenv("TAPEVM_ECHO_BANNER")
    if banner is not None and banner.strip():
        out["echo_banner"] = _parse_bool("TAPEVM_ECHO_BANNER", banner)
    return out


def load_config_file(path: Path) -> dict[str, Any]:
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"config must be a YAML mapping: {path}")
    return dict(data)


def load_settings(
    config_path: Path | None = None, *, overrides: dict[str, Any] | None = None
) -> VMSettings:
    """Resolve settings: environment (and `.env`), then the YAML file, then overrides."""
    load_env()
    merged = _settings_from_env()
    if config_path is not None:
        merged.update(load_config_file(config_path))
    if overrides:
        merged.update({k: v for k, v in overrides.items() if v is not None})
    return VMSettings.model_validate(merged)
