import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


CONFIG_FILE_NAMES = [
    ".locscan.yaml",
    ".locscan.yml",
    ".locscan.json",
    "locscan.yaml",
    "locscan.yml",
    "locscan.json",
]

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": 1,
    "languages": {
        "enabled": [
            "c",
            "cpp",
            "csharp",
            "go",
            "java",
            "kotlin",
            "javascript",
            "typescript",
            "python",
            "ruby",
            "rust",
            "swift",
        ]
    },
    "locate": {
        # language -> node types; languages not listed use their declarations
        "node_types": {},
        "offset": 0,
    },
    "reporting": {
        "format": "text",
        "display_text_max_length": 80,
    },
    "logging": {
        "level": "WARNING",
    },
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def find_config(start: str = ".") -> Optional[str]:
    """Return the first known config file name present in ``start``."""
    directory = Path(start)
    if directory.is_file():
        directory = directory.parent
    for name in CONFIG_FILE_NAMES:
        candidate = directory / name
        if candidate.is_file():
            return str(candidate)
    return None


@dataclass(frozen=True)
class Config:
    data: Dict[str, Any]

    @classmethod
    def load(cls, path: Optional[str]) -> "Config":
        if not path:
            return cls(DEFAULT_CONFIG)
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        raw = config_path.read_text(encoding="utf-8")
        if config_path.suffix.lower() in {".json"}:
            overrides = json.loads(raw)
        else:
            overrides = yaml.safe_load(raw) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        locate = overrides.get("locate", {})
        if not isinstance(locate, dict):
            raise ValueError(f"locate must be a mapping: {path}")
        node_types = locate.get("node_types", {})
        if not isinstance(node_types, dict) or not all(
            isinstance(types, list) for types in node_types.values()
        ):
            raise ValueError(
                f"locate.node_types must map languages to lists of node types: {path}"
            )
        merged = _deep_merge(DEFAULT_CONFIG, overrides)
        return cls(merged)

    def languages(self) -> set[str]:
        return set(self.data.get("languages", {}).get("enabled", []))

    def node_types(self, language: str) -> List[str]:
        return list(self.data.get("locate", {}).get("node_types", {}).get(language, []))

    def offset(self) -> int:
        return int(self.data.get("locate", {}).get("offset", 0))

    def reporting(self) -> Dict[str, Any]:
        return self.data.get("reporting", {})

    def display_text_max_length(self) -> int:
        return int(self.reporting().get("display_text_max_length", 80))

    def log_level(self) -> str:
        return str(self.data.get("logging", {}).get("level", "WARNING")).upper()
