"""Utility for turning entity names into filename-safe tokens."""

import re

# Everything except ASCII letters, digits and underscore becomes a dot.
UNSAFE_RE = re.compile(r"[^A-Za-z0-9_]")


def sanitize(name: str) -> str:
    """Make a stable filename/URL token out of an entity name.

    The mapping is many-to-one: ``A\\Foo`` and ``A.Foo`` share a token.
    """
    return UNSAFE_RE.sub(".", name)
