"""
Command table loader.

Loads the title -> command mapping from ~/.config/quickrun/commands.yaml
(or the file named by QUICKRUN_COMMANDS_FILE / --commands). Files ending in
.json are parsed as JSON, everything else as YAML.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from quickrun.exceptions import ConfigurationError

from .constants import DEFAULT_COMMANDS_FILE, RENDER_MODE_WINDOWED, RENDER_MODES
from .settings import get_commands_path, get_render_mode

logger = logging.getLogger(__name__)

EXAMPLE_CONFIG = """# quickrun command table
#
# Each entry maps a title to the command it runs. Titles are listed in
# sorted order. Commands are split on whitespace: no quoting is supported.
#
# render_mode: windowed   # or "centered" to always show every row

commands:
  build: cargo build
  disk usage: du -sh .
  git log: git log --oneline -20
  list: ls -la
  top: htop
"""


@dataclass
class LauncherConfig:
    """Parsed command table."""

    commands: Dict[str, str] = field(default_factory=dict)
    render_mode: str = RENDER_MODE_WINDOWED
    source: Optional[Path] = None


def _parse(path: Path) -> Any:
    text = path.read_text()
    if path.suffix.lower() == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def load_commands_config(path: Optional[Path] = None) -> LauncherConfig:
    """
    Load the command table.

    Args:
        path: Explicit file to load. When omitted the environment override or
            the default location is used, and a missing file is not an error.

    Returns:
        LauncherConfig with the commands mapping and render mode

    Raises:
        ConfigurationError: If an explicit file is missing, or any file is
            unreadable, unparsable or has the wrong shape
    """
    explicit = path is not None
    config_path = Path(path).expanduser() if explicit else get_commands_path()

    if not config_path.exists():
        if explicit or config_path != DEFAULT_COMMANDS_FILE:
            raise ConfigurationError("Command table not found", path=str(config_path))
        logger.info(f"No command table at {config_path}, starting empty")
        return LauncherConfig(render_mode=get_render_mode() or RENDER_MODE_WINDOWED)

    try:
        raw = _parse(config_path)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(
            f"Failed to read command table: {e}", path=str(config_path)
        ) from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigurationError("Command table must be a mapping", path=str(config_path))

    # A bare title -> command mapping is accepted as well as the commands: form
    if "commands" in raw:
        commands = raw["commands"] or {}
        render_mode = raw.get("render_mode")
    else:
        commands = raw
        render_mode = None

    if not isinstance(commands, dict):
        raise ConfigurationError("'commands' must be a mapping", path=str(config_path))

    render_mode = str(render_mode or get_render_mode() or RENDER_MODE_WINDOWED).lower()
    if render_mode not in RENDER_MODES:
        raise ConfigurationError(
            f"Unknown render_mode '{render_mode}'. Valid values: {list(RENDER_MODES)}",
            path=str(config_path),
        )

    parsed = {str(title): str(text) for title, text in commands.items() if text is not None}
    logger.debug(f"Loaded {len(parsed)} commands from {config_path}")
    return LauncherConfig(commands=parsed, render_mode=render_mode, source=config_path)


def write_example_config(path: Optional[Path] = None) -> bool:
    """
    Write the example command table if it doesn't exist.

    Returns:
        True if the file was created, False if it already exists
    """
    config_path = Path(path).expanduser() if path else get_commands_path()

    if config_path.exists():
        return False

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(EXAMPLE_CONFIG)
    except OSError as e:
        raise ConfigurationError(
            f"Failed to write command table: {e}", path=str(config_path)
        ) from e

    logger.info(f"Created example command table at {config_path}")
    return True
