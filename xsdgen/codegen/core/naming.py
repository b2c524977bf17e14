"""
Naming utilities for namespace-qualified XSD names.

A qualified name is ``prefix:local``. Anything that does not contain
exactly one colon is treated as unqualified.
"""


def _split_qualified(name: str):
    parts = name.split(":")
    if len(parts) == 2:
        return parts[0], parts[1]
    return None


def ns_prefix(name: str) -> str:
    """
    Return the namespace prefix of a qualified name.

    Args:
        name: Possibly qualified name (e.g. ``xs:string``)

    Returns:
        The prefix, or an empty string when the name is unqualified or
        contains more than one colon
    """
    split = _split_qualified(name)
    return split[0] if split else ""


def trim_ns_prefix(name: str) -> str:
    """
    Strip the namespace prefix from a qualified name.

    Args:
        name: Possibly qualified name (e.g. ``xs:string``)

    Returns:
        The local name, or ``name`` unchanged when it is not of the
        form ``prefix:local``
    """
    split = _split_qualified(name)
    return split[1] if split else name


def make_first_upper_case(name: str) -> str:
    """Upper-case the first letter of ``name``."""
    if len(name) < 2:
        return name.upper()
    return name[0].upper() + name[1:]
