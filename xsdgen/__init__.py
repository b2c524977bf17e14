"""
xsdgen: type resolution and schema sourcing for XSD code generators.
"""

__version__ = "0.1.0"
