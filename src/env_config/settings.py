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

"""HTTP server settings."""

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from .defaults import SERVER_ENV_VAR_MAPPING, read_env_overrides
from .exceptions import ConfigurationError
from .store import EnvironmentStore, ProcessEnvironment


class ServerSettings(BaseModel):
    """Settings for the HTTP transport."""

    host: str = Field(
        default="127.0.0.1",
        description="Host to bind to",
    )
    port: int = Field(
        default=8081,
        ge=1,
        le=65535,
        description="Port to bind to",
    )
    keys: list[str] = Field(
        default_factory=list,
        description="Configuration keys served by GET /config",
    )

    @classmethod
    def from_environment(cls, store: EnvironmentStore | None = None) -> "ServerSettings":
        """Build server settings from ENV_CONFIG_HTTP_* and ENV_CONFIG_KEYS.

        Raises:
            ConfigurationError: If a setting is present but invalid
        """
        values = read_env_overrides(SERVER_ENV_VAR_MAPPING, store or ProcessEnvironment())
        try:
            return cls(**values)
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid server settings: {e}",
                user_message="Invalid HTTP server settings",
                context={"fields": sorted(values)},
                recovery_suggestion="Check ENV_CONFIG_HTTP_HOST and ENV_CONFIG_HTTP_PORT",
            ) from e
