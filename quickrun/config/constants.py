"""
Centralized constants for quickrun.
"""

from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

QUICKRUN_CONFIG_DIR = Path.home() / ".config" / "quickrun"
DEFAULT_COMMANDS_FILE = QUICKRUN_CONFIG_DIR / "commands.yaml"
LOG_FILE_NAME = "quickrun.log"

# =============================================================================
# RENDERING
# =============================================================================

RENDER_MODE_WINDOWED = "windowed"
RENDER_MODE_CENTERED = "centered"
RENDER_MODES = (RENDER_MODE_WINDOWED, RENDER_MODE_CENTERED)

# Rows reserved around the data rows: one header, one filter-status line
RESERVED_ROWS = 2

HEADER_TITLE = "Title"
HEADER_COMMAND = "Command"
FILTER_PREFIX = "Filter: "

SELECTED_ROW_STYLE = "bold red reverse"
FILTER_PREFIX_STYLE = "bold blue"
FILTER_TEXT_STYLE = "italic cyan"

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

ENV_VAR_DEFINITIONS = {
    "QUICKRUN_COMMANDS_FILE": {
        "description": "Path to the command table (YAML or JSON)",
        "default": None,
        "valid_values": None,
    },
    "QUICKRUN_RENDER_MODE": {
        "description": "How the list is laid out: windowed or centered",
        "default": RENDER_MODE_WINDOWED,
        "valid_values": list(RENDER_MODES),
    },
    "QUICKRUN_LOG_LEVEL": {
        "description": "Log level for ~/.config/quickrun/quickrun.log",
        "default": "INFO",
        "valid_values": ["DEBUG", "INFO", "WARNING", "ERROR"],
    },
}
