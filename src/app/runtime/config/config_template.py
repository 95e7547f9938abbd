"""Configuration template substitution utilities."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic_core import ValidationError

from src.app.runtime.config.config_data import ConfigData


def substitute_env_vars(text: str) -> str:
    """
    Substitute environment variable placeholders in text.

    Supports formats:
    - ${VAR_NAME} - required variable (raises error if missing)
    - ${VAR_NAME:-default} - optional with default value
    - ${VAR_NAME:?error_message} - required with custom error message
    """
    def replacer(match):
        var_expr = match.group(1)

        # Handle default values: ${VAR:-default}
        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return os.getenv(var_name, default)

        # Handle error messages: ${VAR:?message}
        elif ":?" in var_expr:
            var_name, error_msg = var_expr.split(":?", 1)
            value = os.getenv(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name}: {error_msg}")
            return value

        # Handle required variables: ${VAR}
        else:
            var_name = var_expr
            value = os.getenv(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name} not set")
            return value

    pattern = r'\$\{([^}]+)\}'
    return re.sub(pattern, replacer, text)


def apply_environment_overrides(env_mode: str) -> list[str]:
    """Copy <ENV>_-prefixed variables to their unprefixed names.

    With APP_ENVIRONMENT=test, TEST_LOG_LEVEL=DEBUG sets LOG_LEVEL=DEBUG
    before the template is substituted.

    Returns:
        The names of the variables that were set
    """
    prefix = f"{env_mode.upper()}_"
    overridden = []
    for var_name, var_value in list(os.environ.items()):
        if not var_name.startswith(prefix):
            continue
        new_var_name = var_name[len(prefix):]
        os.environ[new_var_name] = var_value
        overridden.append(new_var_name)
        logger.debug(f"Set environment variable {new_var_name} from {var_name}")
    return overridden


def load_templated_yaml(file_path: Path) -> ConfigData:
    """
    Load a YAML file with environment variable substitution.

    Args:
        file_path: Path to the YAML file

    Returns:
        Parsed YAML with environment variables substituted

    Raises:
        ValueError: If required environment variables are missing, the YAML is
            malformed or the values do not validate
        FileNotFoundError: If the YAML file doesn't exist
    """
    with open(file_path) as f:
        content = f.read()

    env_mode = os.getenv("APP_ENVIRONMENT", "development")
    logger.info(f"Loading configuration for environment: {env_mode}")

    overridden = apply_environment_overrides(env_mode)
    if overridden:
        logger.info(f"Applied environment-specific overrides: {overridden}")

    substituted_content = substitute_env_vars(content)

    try:
        loaded = yaml.safe_load(substituted_content)
        if not loaded or not isinstance(loaded, dict):
            raise ValueError("Failed to parse YAML")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    try:
        # Extract the 'config' section from the YAML structure
        config_data = loaded.get('config', {})
        config = ConfigData(**config_data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    if config.app.environment != env_mode and env_mode in ("development", "production", "test"):
        logger.warning(
            f"config.yaml declares environment '{config.app.environment}' "
            f"but APP_ENVIRONMENT is '{env_mode}'"
        )

    return config


def load_config(file_path: Path) -> ConfigData:
    """Load file_path, falling back to the defaults when it does not exist."""
    if not file_path.exists():
        logger.warning(f"Configuration file {file_path} not found; using defaults")
        return ConfigData()
    return load_templated_yaml(file_path)
