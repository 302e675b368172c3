#!/usr/bin/env python3
"""
KUBETINT SETTINGS - Configuration Loader
----------------------------------------
Resolves the YAML view style and the screen-dump directory.

Sources, lowest to highest priority:
    1. Built-in defaults (stock k9s colors, XDG state dir)
    2. Settings file ($KUBETINT_CONFIG or $XDG_CONFIG_HOME/kubetint/config.yaml)
    3. Skin file (k9s format), named by the settings file or the CLI

Settings file layout:
    kubetint:
      screenDumpDir: ~/dumps
      skin: ~/.config/k9s/skins/dracula.yaml
      views:
        yaml:
          keyColor: steelblue
          colonColor: white
          valueColor: papayawhip

Author: KubeTint Team
Date: 2026-10-19
"""

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from ruamel.yaml import YAML, YAMLError

from kubetint.core.errors import ConfigError
from kubetint.core.models import StyleSpec

logger = logging.getLogger("kubetint.config")

CONFIG_ENV = "KUBETINT_CONFIG"
APP_DIR = "kubetint"

# Skin/settings keys -> StyleSpec fields
STYLE_KEYS = {
    "keyColor": "key_color",
    "colonColor": "colon_color",
    "valueColor": "value_color",
}

def _xdg_dir(env_var: str, fallback: str) -> Path:
    base = os.environ.get(env_var)
    return Path(base) if base else Path.home() / fallback

def default_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override).expanduser()
    return _xdg_dir("XDG_CONFIG_HOME", ".config") / APP_DIR / "config.yaml"

def default_dump_dir() -> Path:
    return _xdg_dir("XDG_STATE_HOME", ".local/state") / APP_DIR / "screen-dumps"

@dataclass
class Settings:
    """Resolved runtime configuration."""
    style: StyleSpec = field(default_factory=StyleSpec)
    dump_dir: Path = field(default_factory=default_dump_dir)
    skin: Optional[Path] = None

def _read_yaml(path: Path) -> Dict[str, Any]:
    """Loads a YAML mapping; an empty document yields {}."""
    yaml = YAML(typ='safe')
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.load(f)
    except OSError as e:
        raise ConfigError(f"Unable to read {path}: {e}") from e
    except YAMLError as e:
        raise ConfigError(f"Malformed YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {path}")
    return data

def _section(data: Mapping[str, Any], *keys: str) -> Dict[str, Any]:
    """Walks nested keys; missing sections are empty, non-mappings are errors."""
    node: Any = data
    for key in keys:
        node = node.get(key) if isinstance(node, Mapping) else None
        if node is None:
            return {}
        if not isinstance(node, Mapping):
            raise ConfigError(f"Section '{'.'.join(keys)}' must be a mapping")
    return dict(node)

def _merge_style(style: StyleSpec, colors: Mapping[str, Any]) -> StyleSpec:
    overrides = {
        STYLE_KEYS[key]: str(value)
        for key, value in colors.items()
        if key in STYLE_KEYS and value
    }
    return replace(style, **overrides) if overrides else style

def load_skin(path: Path, base: Optional[StyleSpec] = None) -> StyleSpec:
    """Reads the k9s.views.yaml colors of a k9s skin file."""
    path = Path(path).expanduser()
    if not path.is_file():
        raise ConfigError(f"Skin file not found: {path}")
    colors = _section(_read_yaml(path), "k9s", "views", "yaml")
    logger.debug(f"Loaded skin {path}: {colors}")
    return _merge_style(base or StyleSpec(), colors)

def load_settings(path: Optional[Path] = None, skin: Optional[Path] = None) -> Settings:
    """
    Builds Settings from defaults, the settings file and an optional skin.
    A missing settings file is not an error; a missing skin file is.
    """
    config_path = Path(path).expanduser() if path else default_config_path()
    settings = Settings()

    if config_path.is_file():
        root = _section(_read_yaml(config_path), "kubetint")
        settings.style = _merge_style(settings.style, _section(root, "views", "yaml"))
        if root.get("screenDumpDir"):
            settings.dump_dir = Path(str(root["screenDumpDir"])).expanduser()
        if root.get("skin"):
            settings.skin = Path(str(root["skin"])).expanduser()
    else:
        logger.debug(f"No settings file at {config_path}; using defaults")

    if skin:
        settings.skin = Path(skin).expanduser()
    if settings.skin:
        settings.style = load_skin(settings.skin, base=settings.style)

    return settings
