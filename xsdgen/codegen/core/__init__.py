"""
Core code generation components.

Provides the built-in type table, type resolution and the base generator
interface used by all language generators.
"""

from .builtins import (
    BUILTIN_TYPES,
    BuiltinEntry,
    Language,
    is_builtin,
    lookup_builtin,
    parse_language,
    supported_languages,
)
from .naming import make_first_upper_case, ns_prefix, trim_ns_prefix
from .schema import (
    Attribute,
    AttributeGroup,
    ComplexType,
    Declaration,
    DeclarationKind,
    Element,
    Group,
    Restriction,
    SimpleType,
)
from .resolver import DeclarationIndex, resolve_base, resolve_native_type
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .generator import (
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    call_by_name,
    dispatch,
    generate_code,
    write_output,
)

__all__ = [
    # Built-in type table
    "BUILTIN_TYPES",
    "BuiltinEntry",
    "Language",
    "is_builtin",
    "lookup_builtin",
    "parse_language",
    "supported_languages",
    # Namespace helpers
    "make_first_upper_case",
    "ns_prefix",
    "trim_ns_prefix",
    # Declaration model
    "Attribute",
    "AttributeGroup",
    "ComplexType",
    "Declaration",
    "DeclarationKind",
    "Element",
    "Group",
    "Restriction",
    "SimpleType",
    # Resolution
    "DeclarationIndex",
    "resolve_base",
    "resolve_native_type",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "call_by_name",
    "dispatch",
    "generate_code",
    "write_output",
]
