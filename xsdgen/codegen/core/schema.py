"""
Declaration model shared by the parser and the generators.

A parsed schema is a flat, ordered list of declarations. Declarations
reference each other and the XSD primitives by (possibly qualified) name.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class DeclarationKind(Enum):
    """Kinds of top-level schema constructs."""

    SIMPLE_TYPE = "simple_type"
    ATTRIBUTE = "attribute"
    ELEMENT = "element"
    COMPLEX_TYPE = "complex_type"
    GROUP = "group"
    ATTRIBUTE_GROUP = "attribute_group"


@dataclass
class Restriction:
    """Facets of a simple type restriction."""

    enumeration: List[str] = field(default_factory=list)
    pattern: Optional[str] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    min_inclusive: Optional[str] = None
    max_inclusive: Optional[str] = None


@dataclass
class Declaration:
    """Common part of every declaration."""

    name: str
    doc: Optional[str] = None

    kind = None  # set by each subclass


@dataclass
class SimpleType(Declaration):
    """A data type derived from a base type."""

    base: str = ""
    is_list: bool = False
    is_union: bool = False
    anonymous: bool = False
    member_types: List[str] = field(default_factory=list)
    restriction: Restriction = field(default_factory=Restriction)

    kind = DeclarationKind.SIMPLE_TYPE


@dataclass
class Attribute(Declaration):
    """An attribute and the type of its value."""

    type: str = ""
    optional: bool = False
    default: Optional[str] = None

    kind = DeclarationKind.ATTRIBUTE


@dataclass
class Element(Declaration):
    """An element and the type of its content."""

    type: str = ""
    plural: bool = False
    optional: bool = False
    default: Optional[str] = None

    kind = DeclarationKind.ELEMENT


@dataclass
class ComplexType(Declaration):
    """A structured type with child elements and attributes."""

    base: str = ""
    elements: List[Element] = field(default_factory=list)
    attributes: List[Attribute] = field(default_factory=list)
    mixed: bool = False

    kind = DeclarationKind.COMPLEX_TYPE


@dataclass
class Group(Declaration):
    """A named model group of elements."""

    elements: List[Element] = field(default_factory=list)
    ref: Optional[str] = None
    plural: bool = False

    kind = DeclarationKind.GROUP


@dataclass
class AttributeGroup(Declaration):
    """A named group of attributes."""

    attributes: List[Attribute] = field(default_factory=list)
    ref: Optional[str] = None

    kind = DeclarationKind.ATTRIBUTE_GROUP
