"""Utility for splitting a fully-qualified type name."""

NAMESPACE_SEPARATOR = "\\"


def namespace_of(full_name: str) -> str:
    """Determine the namespace part of a backslash-separated name."""
    name = full_name.lstrip(NAMESPACE_SEPARATOR)
    head, sep, _ = name.rpartition(NAMESPACE_SEPARATOR)
    return head if sep else ""


def short_name_of(full_name: str) -> str:
    """Determine the unqualified part of a backslash-separated name."""
    return full_name.rstrip(NAMESPACE_SEPARATOR).rpartition(NAMESPACE_SEPARATOR)[2]
