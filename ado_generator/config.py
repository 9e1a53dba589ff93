"""
Settings
========

Defaults < optional YAML file < environment (a `.env` file is loaded first).
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Dict, Optional

import yaml
from dotenv import find_dotenv, load_dotenv


@dataclass
class Settings:
    api_key: Optional[str] = None
    model: str = "gpt-4o"
    classify_temperature: float = 0.1  # Low temperature for consistent classification
    generate_temperature: float = 0.2
    request_timeout: int = 60
    catalog_path: str = "config/config_all.json"
    components_dir: str = "config/objects"
    context_path: str = "context.json"
    queries_path: str = "queries.json"
    output_dir: str = "generated"
    index_path: str = "generated_map.json"
    debug: bool = False


# Environment variable -> Settings field
ENV_VARS = {
    "ADO_MODEL": "model",
    "ADO_CLASSIFY_TEMPERATURE": "classify_temperature",
    "ADO_GENERATE_TEMPERATURE": "generate_temperature",
    "ADO_REQUEST_TIMEOUT": "request_timeout",
    "ADO_CATALOG_PATH": "catalog_path",
    "ADO_COMPONENTS_DIR": "components_dir",
    "ADO_CONTEXT_PATH": "context_path",
    "ADO_QUERIES_PATH": "queries_path",
    "ADO_OUTPUT_DIR": "output_dir",
    "ADO_INDEX_PATH": "index_path",
    "ADO_DEBUG": "debug",
}

_FIELD_TYPES = {f.name: f.type for f in fields(Settings)}


def _coerce(name: str, value):
    kind = _FIELD_TYPES[name]
    if value is None:
        return None
    if kind in ("bool", bool):
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in ("1", "true", "yes", "on")
    if kind in ("int", int):
        return int(value)
    if kind in ("float", float):
        return float(value)
    return str(value)


def load_yaml_config(path) -> Dict:
    """Read a YAML settings file, keeping only known keys"""
    with open(path, "r", encoding="utf8") as f:
        config = yaml.safe_load(f) or {}
    if not isinstance(config, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")
    return {k: v for k, v in config.items() if k in _FIELD_TYPES}


def load_settings(config_file: Optional[str] = None) -> Settings:
    """
    Build Settings for this process.

    Args:
        config_file: Optional YAML file overriding the defaults

    Returns:
        Settings with environment variables applied last
    """
    load_dotenv(find_dotenv(usecwd=True))

    values: Dict = {}
    if config_file:
        for name, value in load_yaml_config(Path(config_file)).items():
            values[name] = _coerce(name, value)

    for env_name, name in ENV_VARS.items():
        raw = os.getenv(env_name)
        if raw is not None and raw != "":
            values[name] = _coerce(name, raw)

    api_key = os.getenv("OPENAI_API_KEY") or os.getenv("API_KEY")
    if api_key:
        values["api_key"] = api_key

    return Settings(**values)
