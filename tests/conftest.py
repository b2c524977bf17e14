import pytest

from xsdgen.codegen import Attribute, Element, SimpleType


@pytest.fixture
def declarations():
    return [
        SimpleType(name="Currency", base="xs:string"),
        SimpleType(name="Amount", base="xs:decimal"),
        SimpleType(name="Codes", base="xs:token", is_list=True),
        Attribute(name="lang", type="xml:lang"),
        Element(name="Price", type="Amount"),
        Element(name="Note", type="xs:string"),
    ]
