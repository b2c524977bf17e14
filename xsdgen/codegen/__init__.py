"""
XSD Code Generation Module

Maps schema type references to native types in the supported target
languages and drives per-language generators over parsed declarations.
"""

from .core.builtins import Language, lookup_builtin, supported_languages
from .core.naming import ns_prefix, trim_ns_prefix
from .core.schema import (
    Attribute,
    AttributeGroup,
    ComplexType,
    DeclarationKind,
    Element,
    Group,
    SimpleType,
)
from .core.resolver import DeclarationIndex, resolve_base, resolve_native_type
from .core.generator import (
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    call_by_name,
    generate_code,
)
from .core.config import GeneratorConfig, load_config
from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    list_supported_languages,
    register_generator,
)

# Export main interfaces
__all__ = [
    "Language",
    "lookup_builtin",
    "supported_languages",
    "ns_prefix",
    "trim_ns_prefix",
    "Attribute",
    "AttributeGroup",
    "ComplexType",
    "DeclarationKind",
    "Element",
    "Group",
    "SimpleType",
    "DeclarationIndex",
    "resolve_base",
    "resolve_native_type",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "call_by_name",
    "generate_code",
    "GeneratorConfig",
    "load_config",
    "GeneratorRegistry",
    "RegistryError",
    "get_generator",
    "list_supported_languages",
    "register_generator",
]
