"""Settings loading from project files and environment variables."""

from __future__ import annotations

import os
import tomllib
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import yaml

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(slots=True)
class Settings:
    """littlemock settings with sensible defaults."""

    record_call_sites: bool = True
    check_on_teardown: bool = True

    @classmethod
    def load(cls, project_dir: Path | None = None) -> Settings:
        """Load settings from files and environment variables.

        Priority (highest to lowest):
        1. Environment variables (LITTLEMOCK_*)
        2. Project file (.littlemock.toml, .littlemock.yaml or .littlemock.yml)
        3. [tool.littlemock] in pyproject.toml
        4. Defaults
        """
        root = project_dir or Path.cwd()
        data: dict[str, Any] = {}

        data = cls._merge_config(data, cls._load_pyproject(root / "pyproject.toml"))
        data = cls._merge_config(data, cls._load_config_file(root))
        data = cls._apply_env_vars(data)

        return cls._from_dict(data)

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def _load_pyproject(cls, path: Path) -> dict[str, Any]:
        if not path.exists():
            return {}
        with open(path, "rb") as f:
            return tomllib.load(f).get("tool", {}).get("littlemock", {})

    @classmethod
    def _load_config_file(cls, root: Path) -> dict[str, Any]:
        """Load the project settings file (TOML or YAML)."""
        toml_path = root / ".littlemock.toml"
        yaml_path = root / ".littlemock.yaml"
        yml_path = root / ".littlemock.yml"

        if toml_path.exists():
            with open(toml_path, "rb") as f:
                return tomllib.load(f)
        if yaml_path.exists():
            with open(yaml_path) as f:
                return yaml.safe_load(f) or {}
        if yml_path.exists():
            with open(yml_path) as f:
                return yaml.safe_load(f) or {}

        return {}

    @classmethod
    def _merge_config(cls, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        result = base.copy()
        result.update({key.replace("-", "_"): value for key, value in override.items()})
        return result

    @classmethod
    def _apply_env_vars(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Apply LITTLEMOCK_* environment variables."""
        env_mappings = {
            "LITTLEMOCK_RECORD_CALL_SITES": "record_call_sites",
            "LITTLEMOCK_CHECK_ON_TEARDOWN": "check_on_teardown",
        }

        for env_var, key in env_mappings.items():
            if value := os.environ.get(env_var):
                data[key] = value

        return data

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> Settings:
        return cls(
            record_call_sites=_parse_bool(data.get("record_call_sites", True), "record_call_sites"),
            check_on_teardown=_parse_bool(data.get("check_on_teardown", True), "check_on_teardown"),
        )


def _parse_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"Invalid boolean for {key}: {value!r}")
