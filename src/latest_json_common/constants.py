"""Constants shared across tauri-latest-json packages."""

# Tool home directory (~/.latest-json) and its subdirectories
TOOL_HOME_DIR = ".latest-json"
LOG_SUBDIR = "log"

# User-level configuration (~/.config/latest-json/config.yaml)
USER_CONFIG_DIR = "latest-json"
USER_CONFIG_FILE = "config.yaml"

# Project-level configuration, relative to the Tauri project
PROJECT_CONFIG_FILE = ".latest-json.yaml"
