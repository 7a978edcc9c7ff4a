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

"""
Tests for the configuration resolver.

Tests cover:
- Property access with the default pass-through policy
- Existence checks
- Strict mode
- Coercion
- Live reads without caching
"""

import math
import os
from unittest.mock import patch

import pytest

from env_config import (
    InMemoryEnvironment,
    ResolutionPolicy,
    Resolver,
    StrictAccessError,
)

PASS_THROUGH_POLICIES = [
    pytest.param(None, id="default"),
    pytest.param(ResolutionPolicy(), id="ResolutionPolicy()"),
    pytest.param(
        ResolutionPolicy(load_files=False, strict=False, coerce=False),
        id="all-flags-disabled",
    ),
]


@pytest.fixture()
def populated_store():
    """Provide a store with a handful of defined variables."""
    return InMemoryEnvironment(
        {
            "VARIABLE": "value",
            "SCREAMING_SNAKE": "snake",
            "SCREAMING_SNAKE_CASE": "snake-case",
            "DATABASE_URL": "https://db.example.com",
        }
    )


class TestPropertyAccess:
    """Test reads with pass-through policies."""

    @pytest.mark.parametrize("policy", PASS_THROUGH_POLICIES)
    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("variable", "value"),
            ("screamingSnake", "snake"),
            ("screamingSnakeCase", "snake-case"),
            ("databaseUrl", "https://db.example.com"),
            ("databaseURL", "https://db.example.com"),
            ("database_url", "https://db.example.com"),
        ],
    )
    def test_get_defined(self, policy, populated_store, key, expected):
        """Test that defined keys return their raw string."""
        resolver = Resolver(policy, populated_store)
        assert resolver.get(key) == expected

    @pytest.mark.parametrize("policy", PASS_THROUGH_POLICIES)
    def test_get_undefined_returns_none(self, policy, populated_store):
        """Test that undefined keys resolve to None."""
        resolver = Resolver(policy, populated_store)
        assert resolver.get("notDefined") is None
        assert resolver.get("notDefined", "fallback") == "fallback"

    @pytest.mark.parametrize("policy", PASS_THROUGH_POLICIES)
    def test_has(self, policy, populated_store):
        """Test existence checks."""
        resolver = Resolver(policy, populated_store)
        assert resolver.has("variable") is True
        assert "variable" in resolver
        assert resolver.has("notDefined") is False
        assert "notDefined" not in resolver

    def test_numbers_stay_strings_without_coercion(self):
        """Test that raw values are returned unchanged."""
        resolver = Resolver(store=InMemoryEnvironment({"PORT": "3000", "DEBUG": "true"}))
        assert resolver.get("port") == "3000"
        assert resolver.get("debug") == "true"

    def test_item_access(self, populated_store):
        """Test the mapping-style shorthand."""
        resolver = Resolver(store=populated_store)
        assert resolver["databaseUrl"] == "https://db.example.com"
        assert resolver["notDefined"] is None

    def test_env_key(self):
        """Test that the resolver exposes the variable name it reads."""
        assert Resolver(store=InMemoryEnvironment()).env_key("awsS3Bucket") == "AWS_S3_BUCKET"

    def test_resolve_many(self, populated_store):
        """Test flat resolution keyed by the requested names."""
        resolver = Resolver(store=populated_store)
        assert resolver.resolve_many(["variable", "databaseURL", "missing"]) == {
            "variable": "value",
            "databaseURL": "https://db.example.com",
            "missing": None,
        }

    def test_process_environment_by_default(self):
        """Test that the resolver reads os.environ when no store is given."""
        with patch.dict(os.environ, {"ENV_CONFIG_TEST_DATABASE_ENGINE": "postgres"}):
            resolver = Resolver()
            assert resolver.get("envConfigTestDatabaseEngine") == "postgres"


class TestLiveResolution:
    """Test that resolution reflects the environment at access time."""

    def test_repeated_reads_are_identical(self, populated_store):
        """Test idempotent reads without mutation."""
        resolver = Resolver(ResolutionPolicy(coerce=True), populated_store)
        assert resolver.get("variable") == resolver.get("variable")
        assert populated_store.snapshot()["VARIABLE"] == "value"

    def test_mutation_is_visible(self, memory_store):
        """Test that values set after construction are picked up."""
        resolver = Resolver(store=memory_store)
        assert resolver.get("lateKey") is None

        memory_store.set("LATE_KEY", "now")
        assert resolver.get("lateKey") == "now"
        assert resolver.has("lateKey") is True


class TestStrictMode:
    """Test strict access policy."""

    @pytest.fixture()
    def resolver(self):
        """Create a strict resolver with one defined key."""
        store = InMemoryEnvironment({"DEFINED": "present"})
        return Resolver(ResolutionPolicy(strict=True), store)

    def test_defined_key(self, resolver):
        """Test that defined keys resolve normally."""
        assert resolver.get("defined") == "present"

    def test_undefined_key_raises(self, resolver):
        """Test the error message names the key and the variable."""
        with pytest.raises(StrictAccessError) as exc_info:
            resolver.get("notDefined")

        assert str(exc_info.value) == (
            "Strict mode error when accessing configuration property 'notDefined'. "
            "NOT_DEFINED is not defined on the environment"
        )
        assert exc_info.value.key == "notDefined"
        assert exc_info.value.env_key == "NOT_DEFINED"
        assert exc_info.value.error_code == "ENV_1000"

    def test_has_never_raises(self, resolver):
        """Test that existence checks are not policy gated."""
        assert resolver.has("notDefined") is False
        assert "notDefined" not in resolver

    def test_default_does_not_bypass_strict(self, resolver):
        """Test that a default value does not silence strict mode."""
        with pytest.raises(StrictAccessError):
            resolver.get("notDefined", "fallback")

    def test_empty_value_is_defined(self):
        """Test that an empty string counts as defined."""
        resolver = Resolver(ResolutionPolicy(strict=True), InMemoryEnvironment({"EMPTY": ""}))
        assert resolver.get("empty") == ""

    @pytest.mark.parametrize("key", ["__deepcopy__", "__iter__", "__getstate__"])
    def test_reserved_keys(self, resolver, key):
        """Test that interception artifacts never raise or hit the store."""
        assert resolver.get(key) is None
        assert resolver.has(key) is False


class TestCoercion:
    """Test coerced reads."""

    @pytest.fixture()
    def store(self):
        """Provide a store covering every coercion rule."""
        return InMemoryEnvironment(
            {
                "ENABLED": "true",
                "DISABLED": "false",
                "NOTHING": "null",
                "UNSET": "undefined",
                "ZIP_CODE": "007",
                "EMPTY": "",
                "MASK": "0x1F",
                "PADDED": " 123 ",
                "NOT_A_NUMBER": "NaN",
                "LIMIT": "Infinity",
                "NAME": "service",
            }
        )

    def test_coerced_values(self, store):
        """Test each coercion rule through the resolver."""
        resolver = Resolver(ResolutionPolicy(coerce=True), store)

        assert resolver.get("enabled") is True
        assert resolver.get("disabled") is False
        assert resolver.get("nothing", "fallback") is None
        assert resolver.get("zipCode") == "007"
        assert resolver.get("empty") == ""
        assert resolver.get("mask") == 31
        assert resolver.get("padded") == 123
        assert math.isnan(resolver.get("notANumber"))
        assert resolver.get("limit") == math.inf
        assert resolver.get("name") == "service"

    def test_undefined_literal_uses_default(self, store):
        """Test that 'undefined' behaves like an unset value."""
        resolver = Resolver(ResolutionPolicy(coerce=True), store)
        assert resolver.get("unset") is None
        assert resolver.get("unset", 5) == 5
        assert resolver.has("unset") is True

    def test_undefined_literal_is_not_strict_failure(self, store):
        """Test that a defined 'undefined' value never raises in strict mode."""
        resolver = Resolver(ResolutionPolicy(strict=True, coerce=True), store)
        assert resolver.get("unset") is None

    def test_strict_with_coercion_still_raises(self, store):
        """Test that missing keys raise with both flags enabled."""
        resolver = Resolver(ResolutionPolicy(strict=True, coerce=True), store)
        with pytest.raises(StrictAccessError):
            resolver.get("missing")

    def test_repr_shows_policy(self, store):
        """Test the resolver repr."""
        resolver = Resolver(ResolutionPolicy(coerce=True), store)
        assert repr(resolver) == "Resolver(strict=False, coerce=True, store=InMemoryEnvironment)"
