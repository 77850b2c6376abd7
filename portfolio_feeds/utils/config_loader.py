from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

import yaml

from ..models import BlogSource


class ConfigError(Exception):
    """Raised when the configuration file is invalid or missing required fields."""


REQUIRED_FIELDS = {"name", "type"}
SOURCE_TYPES = {"feed", "notion"}

DEFAULT_TOKEN_ENV = "NOTION_TOKEN"
DEFAULT_DATABASE_ID_ENV = "NOTION_DATABASE_ID"


def _validate_source_dict(entry: dict) -> None:
    """Validate a single source mapping from YAML.

    Required fields: name (str), type ('feed' | 'notion').
    Feed sources also need a username. Optional for all: limit (positive int).
    Notion sources may name the env vars holding their secrets
    (token_env, database_id_env).
    """
    missing = REQUIRED_FIELDS - set(entry)
    if missing:
        raise ConfigError(f"Missing required fields: {sorted(missing)} in {entry}")

    if entry["type"] not in SOURCE_TYPES:
        raise ConfigError(f"Invalid type '{entry['type']}'. Must be one of {sorted(SOURCE_TYPES)}.")

    if entry["type"] == "feed" and not str(entry.get("username") or "").strip():
        raise ConfigError(f"Feed source '{entry['name']}' requires a username")

    if "limit" in entry and entry["limit"] is not None:
        limit = entry["limit"]
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise ConfigError(f"'limit' must be a positive integer, got: {limit!r}")

    for key in ("token_env", "database_id_env"):
        if key in entry and entry[key] is not None and not isinstance(entry[key], str):
            raise ConfigError(f"'{key}' must be an environment variable name")


def _coerce_source(entry: dict) -> BlogSource:
    source = BlogSource(
        name=str(entry["name"]).strip(),
        type=entry["type"],
        limit=entry.get("limit") or 3,
    )
    if source.type == "feed":
        source.username = str(entry["username"]).strip()
    else:
        # Secrets stay out of the file; only env var names are configured
        source.token = os.environ.get(entry.get("token_env") or DEFAULT_TOKEN_ENV)
        source.database_id = os.environ.get(entry.get("database_id_env") or DEFAULT_DATABASE_ID_ENV)
    return source


def load_sources_config(path: Path | str) -> List[BlogSource]:
    """Load ``sources.yaml`` into typed ``BlogSource`` instances.

    YAML structure:
      - Top-level mapping
      - Key ``sources``: list of source mappings with fields
          - name: string (required, unique)
          - type: 'feed' | 'notion' (required)
          - username: string (required for feed sources)
          - limit: positive integer (optional, default 3)
          - token_env / database_id_env: env var names (notion, optional)

    Unknown top-level keys are ignored for forward compatibility.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError("Top level of the YAML configuration must be a mapping")

    sources_raw: Iterable[dict] = data.get("sources") or []
    if not isinstance(sources_raw, list):
        raise ConfigError("'sources' must be a list in the YAML configuration")

    sources: List[BlogSource] = []
    seen_names: set[str] = set()
    for item in sources_raw:
        if not isinstance(item, dict):
            raise ConfigError(f"Each source must be a mapping, got: {type(item)}")
        _validate_source_dict(item)
        source = _coerce_source(item)
        if source.name in seen_names:
            raise ConfigError(f"Duplicate source name: {source.name}")
        seen_names.add(source.name)
        sources.append(source)
    return sources
