"""Resolve pkgkit settings from arguments, environment and YAML."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import dotenv_values
from pydantic import BaseModel, Field

DEFAULT_HOME = Path("~/.pkgkit")
CONFIG_ENV = "PKGKIT_CONFIG"
DESTINATIONS_ENV = "PKGKIT_DESTINATIONS_DIR"
BIN_DIR_ENV = "PKGKIT_BIN_DIR"


class Settings(BaseModel):
    destinations_dir: Path = Field(
        default_factory=lambda: (DEFAULT_HOME / "destinations").expanduser(),
        description="Directory holding installed destinations",
    )
    bin_dir: Optional[Path] = Field(None, description="Directory with built pkgkit products")

    @property
    def configuration_dir(self) -> Path:
        return self.destinations_dir / "configuration"


def load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def _environment(env: Mapping[str, str], dotenv_path: Path | None) -> Dict[str, str]:
    merged: Dict[str, str] = {}
    if dotenv_path is not None and dotenv_path.exists():
        merged.update({k: v for k, v in dotenv_values(dotenv_path).items() if v is not None})
    merged.update(env)
    return merged


def load_settings(
    env: Mapping[str, str],
    destinations_dir: Path | None = None,
    config_path: Path | None = None,
    dotenv_path: Path | None = None,
) -> Settings:
    """Build settings; explicit arguments win over the environment, which wins over YAML."""
    environment = _environment(env, dotenv_path)
    file_path = config_path or Path(environment.get(CONFIG_ENV, DEFAULT_HOME / "config.yml")).expanduser()
    data: Dict[str, Any] = {}
    if file_path.exists():
        data.update(load_yaml(file_path).get("pkgkit", {}))
    if environment.get(DESTINATIONS_ENV):
        data["destinations_dir"] = environment[DESTINATIONS_ENV]
    if environment.get(BIN_DIR_ENV):
        data["bin_dir"] = environment[BIN_DIR_ENV]
    if destinations_dir is not None:
        data["destinations_dir"] = destinations_dir
    settings = Settings(**data)
    settings.destinations_dir = settings.destinations_dir.expanduser()
    return settings
