"""
Figma token resolution.

Lookup order:
  1. FIGMA_TOKEN environment variable
  2. .env file in the current working directory
  3. ~/.propper config file ({"figmaToken": "..."})
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger("propper.credentials")

CONFIG_PATH = Path.home() / ".propper"


def read_config(path: Path = CONFIG_PATH) -> dict:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable config {path}: {e}")
        return {}


def resolve_token(config_path: Path = CONFIG_PATH) -> str | None:
    """Return the Figma token, or None if no source provides one."""
    if os.environ.get("FIGMA_TOKEN"):
        return os.environ["FIGMA_TOKEN"]

    load_dotenv(Path.cwd() / ".env")
    if os.environ.get("FIGMA_TOKEN"):
        return os.environ["FIGMA_TOKEN"]

    return read_config(config_path).get("figmaToken")


def save_token(token: str, config_path: Path = CONFIG_PATH) -> None:
    """Store the token in the config file, keeping any other keys."""
    config = read_config(config_path)
    config["figmaToken"] = token
    config_path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    try:
        config_path.chmod(0o600)
    except OSError:
        logger.warning(f"Could not restrict permissions on {config_path}")
