"""Centralized config loading — read once at import time.

Values come from ``sitecrew/config.yaml`` layered over DEFAULTS. Point
SITECREW_CONFIG at another YAML file to replace the packaged one. Secrets
stay in the environment (or a project-root ``.env``), never in YAML.
"""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

# Load .env from project root (parent of sitecrew/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(_PROJECT_ROOT / ".env")

DEFAULTS = {
    "provider": "openai",
    "base_url": None,
    "api_key_env": "SITECREW_API_KEY",
    "persona_model": "google/gemini-2.5-flash",
    "synthesis_model": "google/gemini-2.5-flash",
    "temperature": 0.7,
    "persona_max_tokens": 300,
    "synthesis_max_tokens": 8000,
    "request_timeout": None,
    "output_path": "./output/index.html",
    "server_host": "0.0.0.0",
    "server_port": 8000,
}

CONFIG_PATH = Path(
    os.environ.get("SITECREW_CONFIG", Path(__file__).resolve().parent / "config.yaml")
)


def _load(path: Path) -> dict:
    loaded = yaml.safe_load(path.read_text()) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file {path} must contain a mapping.")
    return {**DEFAULTS, **loaded}


_config = _load(CONFIG_PATH)


def get_config() -> dict:
    """Return the loaded config dictionary."""
    return _config
