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

"""Custom exceptions for env-config."""

from datetime import datetime, timezone
from typing import Any


class EnvConfigError(Exception):
    """Base exception for all env-config errors."""

    ERROR_CATEGORY = "GENERAL"
    ERROR_CODE = "ENV_0000"

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
        recovery_suggestion: str | None = None,
    ) -> None:
        super().__init__(message)
        self.user_message = user_message or "An error occurred"
        self.error_code = error_code or self.ERROR_CODE
        self.error_category = self.ERROR_CATEGORY
        self.context = context or {}
        self.recovery_suggestion = recovery_suggestion
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error for transport responses."""
        return {
            "error": self.user_message,
            "error_code": self.error_code,
            "error_category": self.error_category,
            "context": self.context,
            "recovery_suggestion": self.recovery_suggestion,
            "timestamp": self.timestamp.isoformat(),
        }


class StrictAccessError(EnvConfigError):
    """A configuration property was read in strict mode but is not defined."""

    ERROR_CATEGORY = "CLIENT_ERROR"
    ERROR_CODE = "ENV_1000"

    def __init__(self, key: str, env_key: str) -> None:
        message = (
            f"Strict mode error when accessing configuration property '{key}'. "
            f"{env_key} is not defined on the environment"
        )
        user_message = f"Required configuration '{env_key}' is not set"
        context = {"key": key, "env_key": env_key}
        recovery_suggestion = f"Set {env_key} in the environment or in one of the .env files"
        super().__init__(message, user_message, self.ERROR_CODE, context, recovery_suggestion)
        self.key = key
        self.env_key = env_key


class ConfigurationError(EnvConfigError):
    """Invalid hosting or policy settings."""

    ERROR_CATEGORY = "SERVER_ERROR"
    ERROR_CODE = "ENV_2000"
