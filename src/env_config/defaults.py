# MIT License
#
# Copyright (c) 2025 Democratize Technology
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Default values and environment variable tables for env-config."""

import logging
from typing import Any

from .store import EnvironmentStore

logger = logging.getLogger(__name__)

# Variable holding the runtime environment name (development, production, ...)
ENVIRONMENT_VARIABLE = "APP_ENV"

# Substituted for the environment name when it is not set
UNDEFINED_ENVIRONMENT = "undefined"

# Highest precedence first
ENV_FILE_TEMPLATES = (
    ".env.{environment}.local",
    ".env.local",
    ".env.{environment}",
    ".env",
)

TRUTHY_VALUES = ("true", "1", "yes", "on")

# Environment variables configuring the resolution policy
POLICY_ENV_VAR_MAPPING = {
    "ENV_CONFIG_LOAD_FILES": "load_files",
    "ENV_CONFIG_STRICT": "strict",
    "ENV_CONFIG_COERCE": "coerce",
    "ENV_CONFIG_ENV_DIR": "env_dir",
    "ENV_CONFIG_ENVIRONMENT_VARIABLE": "environment_variable",
}

# Environment variables configuring the HTTP server
SERVER_ENV_VAR_MAPPING = {
    "ENV_CONFIG_HTTP_HOST": "host",
    "ENV_CONFIG_HTTP_PORT": "port",
    "ENV_CONFIG_KEYS": "keys",
}

ENV_VAR_TYPES: dict[str, Any] = {
    # Boolean types
    "ENV_CONFIG_LOAD_FILES": bool,
    "ENV_CONFIG_STRICT": bool,
    "ENV_CONFIG_COERCE": bool,
    # Integer types
    "ENV_CONFIG_HTTP_PORT": int,
    # Comma separated lists
    "ENV_CONFIG_KEYS": list,
    # String types (default)
    "ENV_CONFIG_ENV_DIR": str,
    "ENV_CONFIG_ENVIRONMENT_VARIABLE": str,
    "ENV_CONFIG_HTTP_HOST": str,
}


def read_env_overrides(mapping: dict[str, str], store: EnvironmentStore) -> dict[str, Any]:
    """Collect settings from environment variables with type conversion.

    Args:
        mapping: Environment variable name to settings field name
        store: Environment to read from

    Returns:
        Field name to converted value, for every variable that is set and valid
    """
    overrides: dict[str, Any] = {}

    for env_var, field_name in mapping.items():
        env_value = store.get(env_var)
        if env_value is None:
            continue

        var_type = ENV_VAR_TYPES.get(env_var, str)
        try:
            if var_type is bool:
                converted_value: Any = env_value.strip().lower() in TRUTHY_VALUES
            elif var_type is list:
                converted_value = [item.strip() for item in env_value.split(",") if item.strip()]
            else:
                converted_value = var_type(env_value)
        except (ValueError, TypeError) as e:
            logger.warning("Invalid value for %s='%s': %s", env_var, env_value, e)
            continue

        overrides[field_name] = converted_value

    if overrides:
        logger.debug("Loaded settings from environment: %s", sorted(overrides))
    return overrides
