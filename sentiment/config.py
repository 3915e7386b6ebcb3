"""
Hook Service - Configuration.

============================================================
SOURCES
============================================================
- Environment (optionally from a .env file) for service settings
- YAML file for hook definitions, loaded once at startup

Hook file format:

    default_hook: post
    hooks:
      post:
        url: "https://jsonplaceholder.typicode.com/posts/{id}"
        key: body
      transcript:
        url: "https://example.com/recordings/{id}/transcript"
        key: segments
        time: true
        headers:
          Authorization: ["Bearer abc"]

============================================================
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError, TemplateError
from .models import Hook
from .registry import HookRegistry
from .templating import UrlTemplate


# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


DEFAULT_HOOKS_PATH = Path(__file__).resolve().parent.parent / "config" / "hooks.yaml"


# ============================================================
# SERVICE SETTINGS
# ============================================================

@dataclass
class ServiceSettings:
    """
    Service settings read from the environment.
    """

    hooks_path: Path = DEFAULT_HOOKS_PATH
    """YAML file with hook definitions."""

    fetch_timeout_seconds: float = 30.0
    """Total timeout for one remote fetch."""

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ServiceSettings":
        return cls(
            hooks_path=Path(os.getenv("HOOKS_CONFIG", str(DEFAULT_HOOKS_PATH))),
            fetch_timeout_seconds=float(os.getenv("FETCH_TIMEOUT_SECONDS", "30")),
            host=os.getenv("SERVICE_HOST", "0.0.0.0"),
            port=int(os.getenv("SERVICE_PORT", os.getenv("PORT", "8080"))),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


# ============================================================
# HOOK LOADING
# ============================================================

def load_hooks(data: dict[str, Any]) -> HookRegistry:
    """Build a HookRegistry from parsed hook configuration."""
    if not isinstance(data, dict):
        raise ConfigurationError("Hook configuration must be a mapping", stage="configuration")

    hooks_data = data.get("hooks")
    if not isinstance(hooks_data, dict) or not hooks_data:
        raise ConfigurationError("Hook configuration needs a non-empty 'hooks' mapping", stage="configuration")

    default_hook_id = data.get("default_hook")
    if not isinstance(default_hook_id, str) or not default_hook_id:
        raise ConfigurationError("Hook configuration needs a 'default_hook'", stage="configuration")

    hooks = [_parse_hook(str(hook_id), entry) for hook_id, entry in hooks_data.items()]
    return HookRegistry(hooks, default_hook_id=default_hook_id)


def load_registry(path: Optional[Union[str, Path]] = None) -> HookRegistry:
    """Read a YAML hook file and build the registry."""
    path = Path(path) if path else DEFAULT_HOOKS_PATH
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read hook configuration {path}: {e}",
            stage="configuration",
        )
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in hook configuration {path}: {e}",
            stage="configuration",
        )

    logger.info(f"Loading hooks from {path}")
    return load_hooks(data)


def _parse_hook(hook_id: str, entry: Any) -> Hook:
    if not isinstance(entry, dict):
        raise ConfigurationError(f"Hook '{hook_id}' must be a mapping", hook_id=hook_id, stage="configuration")

    url = entry.get("url")
    if not isinstance(url, str) or not url:
        raise ConfigurationError(f"Hook '{hook_id}' needs a 'url'", hook_id=hook_id, stage="configuration")

    try:
        template = UrlTemplate(url)
    except TemplateError as e:
        raise TemplateError(
            f"Hook '{hook_id}': {e.message}",
            template=url,
            hook_id=hook_id,
        ) from e

    key = entry.get("key")
    if key is not None and (not isinstance(key, str) or not key):
        raise ConfigurationError(f"Hook '{hook_id}' key must be a non-empty string", hook_id=hook_id, stage="configuration")

    time_mode = entry.get("time", False)
    if not isinstance(time_mode, bool):
        raise ConfigurationError(f"Hook '{hook_id}' time must be true or false", hook_id=hook_id, stage="configuration")

    return Hook(
        hook_id=hook_id,
        url_template=template,
        headers=_parse_headers(hook_id, entry.get("headers") or {}),
        key=key,
        time_mode=time_mode,
    )


def _parse_headers(hook_id: str, raw: Any) -> dict[str, tuple[str, ...]]:
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Hook '{hook_id}' headers must be a mapping", hook_id=hook_id, stage="configuration")

    headers = {}
    for name, values in raw.items():
        if isinstance(values, str):
            values = [values]
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise ConfigurationError(
                f"Hook '{hook_id}' header '{name}' must be a string or list of strings",
                hook_id=hook_id,
                stage="configuration",
            )
        headers[str(name)] = tuple(values)
    return headers
