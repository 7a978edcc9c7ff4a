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

"""Resolver for convention-based configuration access.

Every read maps the requested key to its environment variable name and looks
it up in the environment store at that moment. Nothing is cached, so changes
to the environment are visible on the next read.

Example:
    resolver = Resolver(ResolutionPolicy(coerce=True))
    resolver.get("databaseUrl")   # reads DATABASE_URL
    resolver.get("port")          # "3000" -> 3000
    "apiKey" in resolver          # is API_KEY defined?
"""

from collections.abc import Iterable
import logging
from typing import Any

from .coercion import UNDEFINED, coerce_value
from .exceptions import StrictAccessError
from .naming import to_env_key
from .policy import ResolutionPolicy
from .store import EnvironmentStore, ProcessEnvironment

logger = logging.getLogger(__name__)


def is_reserved_key(key: str) -> bool:
    """Check for dunder names probed by Python machinery (copy, pickle, ...)."""
    return len(key) > 4 and key.startswith("__") and key.endswith("__")


class Resolver:
    """Resolves configuration keys against an environment store.

    Args:
        policy: Access policy, defaults to pass-through
        store: Environment to read from, defaults to the process environment
    """

    def __init__(
        self,
        policy: ResolutionPolicy | None = None,
        store: EnvironmentStore | None = None,
    ) -> None:
        self._policy = policy or ResolutionPolicy()
        self._store = store or ProcessEnvironment()

    @property
    def policy(self) -> ResolutionPolicy:
        """Get the access policy."""
        return self._policy

    @property
    def store(self) -> EnvironmentStore:
        """Get the environment store."""
        return self._store

    def env_key(self, key: str) -> str:
        """Get the environment variable name read for ``key``."""
        return to_env_key(key)

    def has(self, key: str) -> bool:
        """Check whether ``key`` is defined. Never raises, even in strict mode."""
        if is_reserved_key(key):
            return False
        return self._store.get(to_env_key(key)) is not None

    def get(self, key: str, default: Any = None) -> Any:
        """Resolve ``key``.

        Args:
            key: Configuration key in any casing style
            default: Returned when the key is undefined (or coerces to undefined)

        Returns:
            The raw string, or the coerced value when coercion is enabled

        Raises:
            StrictAccessError: If strict mode is on and the key is undefined
        """
        if is_reserved_key(key):
            return default

        env_key = to_env_key(key)
        raw = self._store.get(env_key)
        logger.debug("Resolving %s from %s (defined=%s)", key, env_key, raw is not None)

        if raw is None:
            if self._policy.strict:
                raise StrictAccessError(key, env_key)
            return default

        if not self._policy.coerce:
            return raw

        value = coerce_value(raw)
        return default if value is UNDEFINED else value

    def resolve_many(self, keys: Iterable[str]) -> dict[str, Any]:
        """Resolve several keys into a flat dict keyed by the requested names."""
        return {key: self.get(key) for key in keys}

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __repr__(self) -> str:
        return (
            f"Resolver(strict={self._policy.strict}, coerce={self._policy.coerce}, "
            f"store={type(self._store).__name__})"
        )
