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

"""Typed configuration views built from a declared shape.

Declare the configuration you expect as a class or ``TypedDict`` and build a
view with one read-only property per annotated field:

    class AppConfig(TypedDict):
        database_url: str
        port: str

    config = typed_config(AppConfig, resolver)
    config.database_url   # resolver.get("database_url") -> DATABASE_URL

Properties resolve on every access, with the resolver's policy applied.
"""

from typing import Any, ClassVar, get_origin, get_type_hints

from .exceptions import ConfigurationError
from .resolver import Resolver

# Members of the generated view that a field must not shadow
RESERVED_FIELDS = frozenset({"as_dict", "fields"})


def _config_fields(shape: type) -> dict[str, Any]:
    """Get the public annotated fields of ``shape``, inherited ones included."""
    hints = get_type_hints(shape)
    return {
        name: hint
        for name, hint in hints.items()
        if not name.startswith("_") and get_origin(hint) is not ClassVar and hint is not ClassVar
    }


def _make_property(name: str, hint: Any) -> property:
    def getter(self: Any) -> Any:
        return self._resolver.get(name)

    getter.__name__ = name
    getter.__doc__ = f"Resolve '{name}' ({getattr(hint, '__name__', hint)})."
    return property(getter)


def build_typed_config(shape: type) -> type:
    """Generate a view class for ``shape``.

    The returned class takes a :class:`Resolver` and exposes each field of
    ``shape`` as a property, plus ``as_dict()`` and the ``fields`` tuple.

    Raises:
        ConfigurationError: If a field name clashes with a view member
    """
    fields = _config_fields(shape)
    clashes = sorted(RESERVED_FIELDS.intersection(fields))
    if clashes:
        raise ConfigurationError(
            f"Configuration shape {shape.__name__} uses reserved field names: {clashes}",
            user_message="Invalid typed configuration shape",
            context={"shape": shape.__name__, "fields": clashes},
            recovery_suggestion="Rename the fields or read them with Resolver.get",
        )

    def __init__(self: Any, resolver: Resolver) -> None:
        self._resolver = resolver

    def as_dict(self: Any) -> dict[str, Any]:
        return self._resolver.resolve_many(fields)

    def __repr__(self: Any) -> str:
        keys = ", ".join(f"{name}={self._resolver.env_key(name)}" for name in fields)
        return f"{type(self).__name__}({keys})"

    namespace: dict[str, Any] = {
        "__slots__": ("_resolver",),
        "__init__": __init__,
        "__repr__": __repr__,
        "__doc__": f"Typed configuration view for {shape.__name__}.",
        "as_dict": as_dict,
        "fields": tuple(fields),
    }
    for name, hint in fields.items():
        namespace[name] = _make_property(name, hint)

    return type(f"Typed{shape.__name__}", (), namespace)


def typed_config(shape: type, resolver: Resolver) -> Any:
    """Build a view for ``shape`` bound to ``resolver``."""
    return build_typed_config(shape)(resolver)
