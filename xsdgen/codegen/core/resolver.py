"""
Type resolution against a list of parsed declarations.

Resolution is a single alias hop: a simple type resolves to its base,
an attribute or element to its type. Callers wanting the end of a longer
chain re-invoke with the result. Duplicate names are not detected and
reference cycles are not guarded against; the first match wins.
"""

from typing import Dict, Iterable, Optional, Union

from .builtins import Language, lookup_builtin
from .naming import make_first_upper_case, trim_ns_prefix
from .schema import Attribute, Declaration, Element, SimpleType


def _alias_target(declaration: Optional[Declaration]) -> Optional[str]:
    # A plain (non-list, non-union) simple type aliases its base; an
    # attribute or element aliases its type.
    if isinstance(declaration, SimpleType):
        if declaration.is_list or declaration.is_union:
            return None
        return declaration.base
    if isinstance(declaration, (Attribute, Element)):
        return declaration.type
    return None


def resolve_base(name: str, declarations: Iterable[Optional[Declaration]]) -> str:
    """
    Resolve ``name`` one hop towards its base type.

    The first plain (non-list, non-union) simple type, attribute or element
    with a matching name wins, whichever kind it is.

    Args:
        name: Declaration name to resolve
        declarations: Parsed declarations, scanned in the given order

    Returns:
        The base/type name of the first match, or ``name`` unchanged
    """
    for declaration in declarations:
        if declaration is None or declaration.name != name:
            continue
        target = _alias_target(declaration)
        if target is not None:
            return target

    return name


class DeclarationIndex:
    """
    Name-indexed view over a declaration list.

    Gives the same answers as :func:`resolve_base` without rescanning the
    list on every lookup. The index is a snapshot; rebuild it if the
    underlying list changes.
    """

    def __init__(self, declarations: Iterable[Optional[Declaration]]):
        self._bases: Dict[str, str] = {}

        for declaration in declarations:
            if declaration is None:
                continue
            target = _alias_target(declaration)
            if target is not None:
                self._bases.setdefault(declaration.name, target)

    def resolve_base(self, name: str) -> str:
        """Index-backed equivalent of the module-level ``resolve_base``."""
        return self._bases.get(name, name)

    def __contains__(self, name: str) -> bool:
        return name in self._bases

    def __len__(self) -> int:
        return len(self._bases)


def resolve_native_type(
    name: str,
    declarations: Union[Iterable[Optional[Declaration]], DeclarationIndex],
    language: Union[Language, str],
) -> str:
    """
    Turn a referenced type name into target-language syntax.

    The name is looked up in the built-in table as given, then by its local
    name. Otherwise it is resolved one hop through the declarations and the
    result is looked up again. A name that still is not a primitive is a
    reference to a declared type and comes back with its first letter
    upper-cased.

    Args:
        name: Type name as written in the schema (e.g. ``xs:string``)
        declarations: Declarations to resolve aliases against
        language: Target language

    Returns:
        Native type spelling; never fails
    """
    native, found = _lookup_qualified(name, language)
    if found:
        return native

    local_name = trim_ns_prefix(name)
    if isinstance(declarations, DeclarationIndex):
        base = declarations.resolve_base(local_name)
    else:
        base = resolve_base(local_name, declarations)

    native, found = _lookup_qualified(base, language)
    if found:
        return native

    return make_first_upper_case(trim_ns_prefix(base))


def _lookup_qualified(name: str, language: Union[Language, str]):
    # xml:lang and friends are keyed with their prefix
    native, found = lookup_builtin(name, language)
    if found:
        return native, found
    return lookup_builtin(trim_ns_prefix(name), language)
