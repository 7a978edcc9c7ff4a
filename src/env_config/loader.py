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

"""Precedence-ordered loading of .env files into an environment store.

Files are looked up in this order, highest precedence first:

1. ``.env.{environment}.local``
2. ``.env.local``
3. ``.env.{environment}``
4. ``.env``

A key is only written when the store does not already define it, so values
present before loading always win, and a file earlier in the list wins over
the ones after it. Missing files are skipped; unreadable files are skipped
with a warning.
"""

from dataclasses import dataclass, field
import logging
from pathlib import Path

from dotenv import dotenv_values

from .defaults import ENV_FILE_TEMPLATES, ENVIRONMENT_VARIABLE, UNDEFINED_ENVIRONMENT
from .policy import ResolutionPolicy
from .store import EnvironmentStore

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Outcome of a single load run."""

    loaded_files: list[Path] = field(default_factory=list)
    skipped_files: list[Path] = field(default_factory=list)
    applied_keys: list[str] = field(default_factory=list)


class EnvFileLoader:
    """Fills gaps in an environment store from layered .env files."""

    def __init__(
        self,
        store: EnvironmentStore,
        env_dir: str | Path = ".",
        environment_variable: str = ENVIRONMENT_VARIABLE,
    ) -> None:
        self.store = store
        self.env_dir = Path(env_dir)
        self.environment_variable = environment_variable

    @classmethod
    def from_policy(cls, policy: ResolutionPolicy, store: EnvironmentStore) -> "EnvFileLoader":
        """Create a loader using the policy's directory and environment variable."""
        return cls(store, policy.env_dir, policy.environment_variable)

    @property
    def environment(self) -> str:
        """Current runtime environment name, ``undefined`` when unset."""
        value = self.store.get(self.environment_variable)
        return UNDEFINED_ENVIRONMENT if value is None else value

    def candidate_paths(self) -> list[Path]:
        """Get the candidate files, highest precedence first."""
        environment = self.environment
        return [
            self.env_dir / template.format(environment=environment)
            for template in ENV_FILE_TEMPLATES
        ]

    def load(self) -> LoadResult:
        """Load every existing candidate file into the store."""
        result = LoadResult()

        for path in self.candidate_paths():
            if not path.is_file():
                logger.debug("Skipping missing env file %s", path)
                result.skipped_files.append(path)
                continue

            try:
                values = dotenv_values(path, interpolate=False, encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Failed to load env file %s: %s", path, e)
                result.skipped_files.append(path)
                continue

            applied = self._apply(path, values)
            result.loaded_files.append(path)
            result.applied_keys.extend(applied)
            logger.info("Loaded %d values from %s", len(applied), path)

        return result

    def _apply(self, path: Path, values: dict[str, str | None]) -> list[str]:
        """Write values for keys the store does not define yet.

        Keys or values the store rejects (e.g. an "=" in the name or a NUL
        byte for the process environment) are skipped with a warning.
        """
        applied = []
        for key, value in values.items():
            if value is None:
                # Line without "=", e.g. a bare "KEY"
                continue
            if key in self.store:
                continue
            try:
                self.store.set(key, value)
            except ValueError as e:
                logger.warning("Skipping invalid entry %r in %s: %s", key, path, e)
                continue
            applied.append(key)
        return applied
