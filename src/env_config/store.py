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

"""Environment stores.

The resolver and the file loader never touch ``os.environ`` directly; they go
through an :class:`EnvironmentStore` so tests can run against an isolated
in-memory environment.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, MutableMapping
import os


class EnvironmentStore(ABC):
    """Narrow accessor over a string-to-string environment mapping."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Get the value for ``key``.

        Returns:
            The raw string value, or None when the key is not defined
        """

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Define ``key`` with ``value``, replacing any existing value."""

    @abstractmethod
    def snapshot(self) -> dict[str, str]:
        """Get a copy of the current contents."""

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None


class MappingEnvironment(EnvironmentStore):
    """Store backed by any mutable mapping."""

    def __init__(self, data: MutableMapping[str, str]) -> None:
        self._data = data

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def snapshot(self) -> dict[str, str]:
        return dict(self._data)


class ProcessEnvironment(MappingEnvironment):
    """The live process environment."""

    def __init__(self) -> None:
        super().__init__(os.environ)


class InMemoryEnvironment(MappingEnvironment):
    """Private environment for tests and embedding."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        super().__init__(dict(initial or {}))
