from xsdgen.codegen import (
    Attribute,
    DeclarationIndex,
    Element,
    Language,
    SimpleType,
    resolve_base,
    resolve_native_type,
)


def test_simple_type_resolves_to_base():
    assert resolve_base("Foo", [SimpleType(name="Foo", base="string")]) == "string"


def test_unmatched_name_is_returned_unchanged():
    assert resolve_base("Bar", []) == "Bar"
    assert resolve_base("Bar", [SimpleType(name="Foo", base="string")]) == "Bar"


def test_list_and_union_types_are_not_aliases():
    declarations = [
        SimpleType(name="Ids", base="string", is_list=True),
        SimpleType(name="Either", base="string", is_union=True),
    ]
    assert resolve_base("Ids", declarations) == "Ids"
    assert resolve_base("Either", declarations) == "Either"


def test_element_and_attribute_resolve_to_type():
    declarations = [
        Attribute(name="currency", type="xs:token"),
        Element(name="price", type="xs:decimal"),
    ]
    assert resolve_base("currency", declarations) == "xs:token"
    assert resolve_base("price", declarations) == "xs:decimal"


def test_first_match_wins():
    declarations = [
        Element(name="Dup", type="first"),
        Element(name="Dup", type="second"),
    ]
    assert resolve_base("Dup", declarations) == "first"


def test_earlier_element_beats_later_simple_type():
    declarations = [
        Element(name="Dup", type="fromElement"),
        SimpleType(name="Dup", base="fromSimpleType"),
    ]
    assert resolve_base("Dup", declarations) == "fromElement"
    assert DeclarationIndex(declarations).resolve_base("Dup") == "fromElement"


def test_earlier_simple_type_beats_later_attribute():
    declarations = [
        SimpleType(name="Dup", base="fromSimpleType"),
        Attribute(name="Dup", type="fromAttribute"),
    ]
    assert resolve_base("Dup", declarations) == "fromSimpleType"
    assert DeclarationIndex(declarations).resolve_base("Dup") == "fromSimpleType"


def test_list_type_does_not_shadow_later_element():
    declarations = [
        SimpleType(name="Dup", base="token", is_list=True),
        Element(name="Dup", type="fromElement"),
    ]
    assert resolve_base("Dup", declarations) == "fromElement"
    assert DeclarationIndex(declarations).resolve_base("Dup") == "fromElement"


def test_only_one_hop():
    declarations = [
        SimpleType(name="A", base="B"),
        SimpleType(name="B", base="string"),
    ]
    assert resolve_base("A", declarations) == "B"
    assert resolve_base(resolve_base("A", declarations), declarations) == "string"


def test_cycles_do_not_loop():
    declarations = [
        SimpleType(name="A", base="B"),
        SimpleType(name="B", base="A"),
    ]
    assert resolve_base("A", declarations) == "B"


def test_none_entries_are_skipped():
    assert resolve_base("Foo", [None, SimpleType(name="Foo", base="int")]) == "int"


def test_index_matches_linear_scan(declarations):
    declarations = declarations + [
        Element(name="Price", type="shadowed"),
        Element(name="Dup", type="elem"),
        SimpleType(name="Dup", base="simple"),
        None,
    ]
    index = DeclarationIndex(declarations)

    for name in ["Currency", "Amount", "Codes", "lang", "Price", "Note", "Dup", "Missing"]:
        assert index.resolve_base(name) == resolve_base(name, declarations), name

    assert "Price" in index
    assert "Codes" not in index
    assert len(index) == 6


def test_native_type_of_builtin_reference(declarations):
    assert resolve_native_type("xs:string", declarations, Language.GO) == "string"
    assert resolve_native_type("xml:lang", declarations, "Java") == "String"


def test_native_type_through_alias(declarations):
    assert resolve_native_type("Currency", declarations, Language.GO) == "string"
    assert resolve_native_type("tns:Amount", declarations, Language.RUST) == "f64"
    assert resolve_native_type("lang", declarations, Language.TYPESCRIPT) == "string"


def test_native_type_of_declared_type(declarations):
    # Price -> Amount is one hop; Amount is a declared type, not a primitive
    assert resolve_native_type("Price", declarations, Language.GO) == "Amount"
    assert resolve_native_type("codes", declarations, Language.GO) == "Codes"


def test_native_type_accepts_index(declarations):
    index = DeclarationIndex(declarations)
    assert resolve_native_type("Currency", index, Language.C) == "char"
