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

"""Config Container - Dependency injection container for the resolver
Performs the one-time .env load and shares a single Resolver.
"""

import logging
from typing import Any

from ..loader import EnvFileLoader, LoadResult
from ..policy import ResolutionPolicy
from ..resolver import Resolver
from ..store import EnvironmentStore, ProcessEnvironment
from ..typed import typed_config

logger = logging.getLogger(__name__)


class ConfigContainer:
    """Dependency injection container for configuration access
    Loads .env files (when enabled) before the resolver is handed out.
    """

    def __init__(
        self,
        policy: ResolutionPolicy | None = None,
        store: EnvironmentStore | None = None,
    ) -> None:
        """Initialize the config container."""
        self._policy = policy or ResolutionPolicy()
        self._store = store or ProcessEnvironment()
        self._services: dict[str, Any] = {}
        self._initialized = False

    @classmethod
    def for_root(
        cls,
        *,
        load_files: bool = False,
        strict: bool = False,
        coerce: bool = False,
        store: EnvironmentStore | None = None,
        **policy_options: Any,
    ) -> "ConfigContainer":
        """Create a container from resolution options."""
        policy = ResolutionPolicy(
            load_files=load_files,
            strict=strict,
            coerce=coerce,
            **policy_options,
        )
        return cls(policy, store)

    @property
    def policy(self) -> ResolutionPolicy:
        """Get the resolution policy."""
        return self._policy

    def initialize(self) -> None:
        """Load env files and build the resolver."""
        if self._initialized:
            return

        logger.debug("Initializing config container...")

        if self._policy.load_files:
            loader = EnvFileLoader.from_policy(self._policy, self._store)
            self._services["load_result"] = loader.load()
        else:
            self._services["load_result"] = LoadResult()

        self._services["resolver"] = Resolver(self._policy, self._store)

        self._initialized = True
        logger.debug("Config container initialized successfully")

    def get_resolver(self) -> Resolver:
        """Get the shared Resolver instance."""
        self._ensure_initialized()
        return self._services["resolver"]

    def get_load_result(self) -> LoadResult:
        """Get the outcome of the .env load."""
        self._ensure_initialized()
        return self._services["load_result"]

    def get_typed(self, shape: type) -> Any:
        """Get a typed view of ``shape`` over the shared resolver."""
        return typed_config(shape, self.get_resolver())

    def cleanup(self) -> None:
        """Release the resolver. Loaded environment values are left in place."""
        if not self._initialized:
            return

        self._services.clear()
        self._initialized = False

        logger.debug("Config container cleaned up")

    def _ensure_initialized(self) -> None:
        """Ensure the container is initialized."""
        if not self._initialized:
            self.initialize()

    def __enter__(self):
        """Context manager entry."""
        self.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit with cleanup."""
        self.cleanup()
