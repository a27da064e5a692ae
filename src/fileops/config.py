"""Application configuration management for fileops.

This module handles the creation, reading, and writing of app-level
configuration stored in OS-specific application data directories.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from platformdirs import user_config_dir

from fileops.file_operations import DEFAULT_POLICY, ConflictPolicy

DEFAULT_POLICY_KEY = "default_policy"


def get_app_config_dir() -> Path:
    """Get the application configuration directory path.

    The directory path is OS-dependent:
    - macOS: ~/Library/Application Support/fileops
    - Linux: ~/.config/fileops
    - Windows: %APPDATA%/fileops

    Can be overridden for testing purposes using the FILEOPS_APP_CONFIG_DIR
    environment variable.

    Returns:
        Path object pointing to the app configuration directory.
    """
    override_dir = os.environ.get("FILEOPS_APP_CONFIG_DIR")
    if override_dir:
        return Path(override_dir)
    return Path(user_config_dir("fileops", appauthor=False))


def get_app_config_path() -> Path:
    """Get the full path to the app configuration file."""
    return get_app_config_dir() / "config.yaml"


def ensure_app_config() -> None:
    """Ensure the app configuration directory and file exist.

    Creates the configuration directory and an empty config.yaml file if they
    don't already exist. Safe to call multiple times.

    Raises:
        OSError: If directory or file creation fails.
    """
    config_dir = get_app_config_dir()
    config_file = get_app_config_path()

    config_dir.mkdir(parents=True, exist_ok=True)

    if not config_file.exists():
        config_file.write_text("{}\n")


def load_app_config() -> dict[str, Any]:
    """Load and parse the app configuration file.

    Returns:
        Dictionary containing the parsed configuration data. Empty if the
        file is empty or contains only whitespace.

    Raises:
        OSError: If the file cannot be read.
        yaml.YAMLError: If the file contains invalid YAML syntax.
    """
    ensure_app_config()
    config_file = get_app_config_path()

    content = config_file.read_text()
    if not content.strip():
        return {}

    config = yaml.safe_load(content)
    return config if config is not None else {}


def save_app_config(config: dict[str, Any]) -> None:
    """Save configuration data to the app configuration file.

    Raises:
        OSError: If the file cannot be written.
        yaml.YAMLError: If the configuration data cannot be serialized to YAML.
    """
    ensure_app_config()
    config_file = get_app_config_path()

    content = yaml.safe_dump(config, default_flow_style=False, sort_keys=False)
    config_file.write_text(content)


def get_default_policy() -> ConflictPolicy:
    """Get the configured default conflict policy.

    Returns:
        The configured policy, or FAIL_ON_CONFLICT if none is set.

    Raises:
        UnsupportedPolicyError: If the configured value names no known policy.
    """
    value = load_app_config().get(DEFAULT_POLICY_KEY)
    if value is None:
        return DEFAULT_POLICY
    return ConflictPolicy.coerce(value)


def set_default_policy(policy: ConflictPolicy | str) -> ConflictPolicy:
    """Persist the default conflict policy.

    Returns:
        The stored policy.

    Raises:
        UnsupportedPolicyError: If policy names no known policy.
    """
    policy = ConflictPolicy.coerce(policy)
    config = load_app_config()
    config[DEFAULT_POLICY_KEY] = policy.value
    save_app_config(config)
    return policy
