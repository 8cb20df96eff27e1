"""YAML/JSON file loading shared by profiles and catalogs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml


def load_structured_file(path: Path) -> Any:
    """Load a YAML or JSON document, choosing the parser from the suffix.

    Unknown suffixes are sniffed: JSON is tried first when the content looks
    like JSON, otherwise YAML.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the content cannot be parsed.
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        return _load_yaml(path)
    if suffix == ".json":
        return _load_json(path)
    return _load_unknown(path)


def _load_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML: {path}") from e


def _load_json(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {path}") from e


def _load_unknown(path: Path) -> Any:
    raw = path.read_text(encoding="utf-8")
    raw_stripped = raw.lstrip()

    if raw_stripped.startswith("{") or raw_stripped.startswith("["):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            pass

    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid file format: {path}") from e
