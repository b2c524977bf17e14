"""
Built-in XSD type table.

Maps every XSD primitive data type (https://www.w3.org/TR/xmlschema-2/#datatype)
to its spelling in each supported target language.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple, Union


class Language(Enum):
    """Target languages, in the column order of the built-in table."""

    GO = "Go"
    TYPESCRIPT = "TypeScript"
    C = "C"
    JAVA = "Java"
    RUST = "Rust"

    @property
    def index(self) -> int:
        return _LANGUAGE_ORDER.index(self)


_LANGUAGE_ORDER: Tuple[Language, ...] = tuple(Language)

# Lower-cased names and aliases accepted by parse_language()
_LANGUAGE_ALIASES: Dict[str, Language] = {
    "go": Language.GO,
    "golang": Language.GO,
    "typescript": Language.TYPESCRIPT,
    "ts": Language.TYPESCRIPT,
    "c": Language.C,
    "java": Language.JAVA,
    "rust": Language.RUST,
    "rs": Language.RUST,
}


@dataclass(frozen=True)
class BuiltinEntry:
    """Native spellings of one XSD primitive, one per target language."""

    xsd_name: str
    native: Tuple[str, str, str, str, str]

    def for_language(self, language: Language) -> str:
        """Return the spelling used by ``language``."""
        return self.native[language.index]


def _entry(xsd_name: str, go: str, ts: str, c: str, java: str, rust: str):
    return xsd_name, BuiltinEntry(xsd_name, (go, ts, c, java, rust))


_STRING = ("string", "string", "char", "String", "char")
_STRING_LIST = ("[]string", "Array<string>", "char[]", "List<String>", "Vec<char>")
_BINARY = ("[]byte", "Array<any>", "char[]", "List<Byte>", "Vec<u8>")
_INTEGER = ("int", "number", "int", "Integer", "isize")
_REAL = ("float64", "number", "float", "Float", "f64")
_TIME = ("time.Time", "string", "char", "String", "char")

# Column order: Go, TypeScript, C, Java, Rust
BUILTIN_TYPES: Mapping[str, BuiltinEntry] = MappingProxyType(
    dict(
        [
            _entry("anyType", *_STRING),
            _entry("ENTITIES", *_STRING_LIST),
            _entry("ENTITY", *_STRING),
            _entry("ID", *_STRING),
            _entry("IDREF", *_STRING),
            _entry("IDREFS", *_STRING_LIST),
            _entry("NCName", *_STRING),
            _entry("NMTOKEN", *_STRING),
            _entry("NMTOKENS", *_STRING_LIST),
            _entry("NOTATION", *_STRING_LIST),
            _entry("Name", *_STRING),
            _entry("QName", "xml.Name", "any", "char", "String", "char"),
            _entry("anyURI", "string", "string", "char", "QName", "char"),
            _entry("base64Binary", *_BINARY),
            _entry("boolean", "bool", "boolean", "bool", "Boolean", "bool"),
            _entry("byte", "byte", "any", "char[]", "Byte", "&[u8]"),
            _entry("date", "time.Time", "string", "char", "Byte", "&[u8]"),
            _entry("dateTime", "time.Time", "string", "char", "Byte", "&[u8]"),
            _entry("decimal", *_REAL),
            _entry("double", *_REAL),
            _entry("duration", *_STRING),
            _entry("float", "float", "number", "float", "Float", "usize"),
            _entry("gDay", *_TIME),
            _entry("gMonth", *_TIME),
            _entry("gMonthDay", *_TIME),
            _entry("gYear", *_TIME),
            _entry("gYearMonth", *_TIME),
            _entry("hexBinary", *_BINARY),
            _entry("int", *_INTEGER),
            _entry("integer", *_INTEGER),
            _entry("language", *_STRING),
            _entry("long", "int64", "number", "int", "Long", "i64"),
            _entry("negativeInteger", *_INTEGER),
            _entry("nonNegativeInteger", *_INTEGER),
            _entry("normalizedString", *_STRING),
            _entry("nonPositiveInteger", *_INTEGER),
            _entry("positiveInteger", *_INTEGER),
            _entry("short", "int16", "number", "int", "Integer", "i16"),
            _entry("string", *_STRING),
            _entry("time", *_TIME),
            _entry("token", *_STRING),
            _entry("unsignedByte", "byte", "any", "char", "Byte", "&[u8]"),
            _entry("unsignedInt", "uint32", "number", "unsigned int", "Integer", "u32"),
            _entry("unsignedLong", "uint64", "number", "unsigned int", "Long", "u64"),
            _entry("unsignedShort", "uint16", "number", "unsigned int", "Short", "u16"),
            _entry("xml:lang", *_STRING),
            _entry("xml:space", *_STRING),
            _entry("xml:base", *_STRING),
            _entry("xml:id", *_STRING),
        ]
    )
)


def parse_language(language: Union[Language, str, None]) -> Optional[Language]:
    """
    Normalize a language given as enum member, name or alias.

    Returns:
        The matching Language, or None when the language is not supported
    """
    if isinstance(language, Language):
        return language
    if not isinstance(language, str):
        return None
    return _LANGUAGE_ALIASES.get(language.strip().lower())


def lookup_builtin(
    xsd_name: str, language: Union[Language, str]
) -> Tuple[str, bool]:
    """
    Look up the native spelling of an XSD primitive.

    Args:
        xsd_name: Primitive name without the XSD namespace prefix
            (``xml:``-qualified attribute names keep theirs)
        language: Target language

    Returns:
        ``(native_name, True)`` on a hit, ``("", False)`` for an unknown
        primitive or an unsupported language
    """
    entry = BUILTIN_TYPES.get(xsd_name)
    if entry is None:
        return "", False

    target = parse_language(language)
    if target is None:
        return "", False

    return entry.for_language(target), True


def is_builtin(xsd_name: str) -> bool:
    """Check whether ``xsd_name`` is a known XSD primitive."""
    return xsd_name in BUILTIN_TYPES


def supported_languages() -> List[str]:
    """Names of all target languages, in table column order."""
    return [language.value for language in _LANGUAGE_ORDER]
