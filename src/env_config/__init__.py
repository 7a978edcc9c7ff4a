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

"""env-config: convention-based configuration from environment variables.

Configuration keys in any casing style map to SCREAMING_SNAKE_CASE
environment variables (``databaseUrl`` -> ``DATABASE_URL``). Layered .env
files can fill in values the process environment does not define, and the
resolver can optionally enforce presence (strict) and convert values
(coerce).
"""

from .coercion import UNDEFINED, coerce_value, is_numeric_eligible, parse_number
from .dependency_injection import ConfigContainer
from .exceptions import ConfigurationError, EnvConfigError, StrictAccessError
from .loader import EnvFileLoader, LoadResult
from .naming import to_env_key
from .policy import ResolutionPolicy
from .resolver import Resolver
from .settings import ServerSettings
from .store import EnvironmentStore, InMemoryEnvironment, ProcessEnvironment
from .typed import build_typed_config, typed_config

__all__ = [
    "UNDEFINED",
    "ConfigContainer",
    "ConfigurationError",
    "EnvConfigError",
    "EnvFileLoader",
    "EnvironmentStore",
    "InMemoryEnvironment",
    "LoadResult",
    "ProcessEnvironment",
    "ResolutionPolicy",
    "Resolver",
    "ServerSettings",
    "StrictAccessError",
    "build_typed_config",
    "coerce_value",
    "is_numeric_eligible",
    "parse_number",
    "to_env_key",
    "typed_config",
]
