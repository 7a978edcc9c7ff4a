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

"""Resolution policy for the configuration resolver."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .defaults import ENVIRONMENT_VARIABLE, POLICY_ENV_VAR_MAPPING, read_env_overrides
from .exceptions import ConfigurationError
from .store import EnvironmentStore, ProcessEnvironment


class ResolutionPolicy(BaseModel):
    """Immutable access policy, fixed when the resolver is built.

    The three flags are independent and all default to disabled.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    load_files: bool = Field(
        default=False,
        description="Populate the environment from .env files before first access",
    )
    strict: bool = Field(
        default=False,
        description="Raise StrictAccessError when reading an undefined key",
    )
    coerce: bool = Field(
        default=False,
        description="Convert raw strings to booleans, numbers and None",
    )
    env_dir: str = Field(
        default=".",
        min_length=1,
        description="Directory searched for .env files",
    )
    environment_variable: str = Field(
        default=ENVIRONMENT_VARIABLE,
        min_length=1,
        description="Variable naming the runtime environment used in .env.{environment} files",
    )

    @classmethod
    def from_environment(
        cls,
        store: EnvironmentStore | None = None,
        **overrides: object,
    ) -> "ResolutionPolicy":
        """Build a policy from ENV_CONFIG_* variables.

        Keyword overrides take precedence over the environment.

        Raises:
            ConfigurationError: If the resulting settings are invalid
        """
        values = read_env_overrides(POLICY_ENV_VAR_MAPPING, store or ProcessEnvironment())
        values.update(overrides)
        try:
            return cls(**values)
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid resolution policy: {e}",
                user_message="Invalid configuration resolution settings",
                context={"fields": sorted(values)},
                recovery_suggestion="Check the ENV_CONFIG_* environment variables",
            ) from e
