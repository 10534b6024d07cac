"""JVM type-descriptor utilities.

Shared by class summaries and the catalog that keys them by descriptor.
"""
from __future__ import annotations

import re

_CLASS_WITH_PACKAGE = r"([a-z][a-z0-9]*/)*[A-Z][a-zA-Z0-9$]*"
_PRIMITIVES = "BCDFIJSZ"

TYPE_DESCRIPTOR_RE = re.compile(r"(\[)*((L" + _CLASS_WITH_PACKAGE + r";)|[" + _PRIMITIVES + r"])")


def is_type_descriptor(desc: str) -> bool:
    """Return True when *desc* is a full primitive, class or array descriptor."""
    if not isinstance(desc, str):
        return False
    return TYPE_DESCRIPTOR_RE.fullmatch(desc) is not None


def class_descriptor(name: str) -> str:
    """Convert ``java.lang.String`` or ``java/lang/String`` to ``Ljava/lang/String;``.

    Values that are already descriptors are returned unchanged.
    """
    name = name.strip()
    if is_type_descriptor(name):
        return name
    return f"L{name.replace('.', '/')};"
