import json

import pytest

from xsdgen.codegen import CodeGenerator, GeneratorConfig, Language
from xsdgen.codegen.registry import GeneratorRegistry, RegistryError


class RustGenerator(CodeGenerator):
    @property
    def language(self):
        return Language.RUST

    @property
    def file_extension(self):
        return ".rs"


class JavaGenerator(CodeGenerator):
    @property
    def language(self):
        return Language.JAVA

    @property
    def file_extension(self):
        return ".java"


@pytest.fixture
def registry():
    registry = GeneratorRegistry()
    registry.register("rust", RustGenerator, aliases=["rs"])
    return registry


def test_lookup_by_name_and_alias(registry):
    assert registry.get_generator_class("Rust") is RustGenerator
    assert registry.get_generator_class("rs") is RustGenerator
    assert registry.is_supported("RS")
    assert not registry.is_supported("java")


def test_unknown_language(registry):
    with pytest.raises(RegistryError, match="Available: rust"):
        registry.get_generator_class("cobol")


def test_rejects_non_generator_class(registry):
    with pytest.raises(RegistryError):
        registry.register("python", dict)


def test_duplicate_registration_is_skipped(registry):
    registry.register("rust", JavaGenerator)
    assert registry.get_generator_class("rust") is RustGenerator

    registry.register("rust", JavaGenerator, replace=True)
    assert registry.get_generator_class("rust") is JavaGenerator


def test_alias_conflicts(registry):
    with pytest.raises(RegistryError):
        registry.register("java", JavaGenerator, aliases=["rs"])
    with pytest.raises(RegistryError):
        registry.register("java", JavaGenerator, aliases=["rust"])
    assert not registry.is_supported("java")


def test_unregister_removes_aliases(registry):
    registry.unregister("rust")
    assert registry.list_languages() == []
    assert not registry.is_supported("rs")


def test_create_generator_with_defaults(registry):
    generator = registry.create_generator("rs")
    assert isinstance(generator, RustGenerator)
    assert generator.config.language == "Rust"
    assert "derive" in generator.config.custom


def test_create_generator_with_dict(registry):
    generator = registry.create_generator("rust", {"package_name": "types", "edition": "2021"})
    assert generator.config.package_name == "types"
    assert generator.config.custom["edition"] == "2021"


def test_create_generator_with_config_file(registry, tmp_path):
    config_file = tmp_path / "rust.json"
    config_file.write_text(json.dumps({"output_dir": "gen"}), encoding="utf-8")

    generator = registry.create_generator("rust", config_file)
    assert generator.config.output_dir == "gen"


def test_create_generator_with_config_object(registry):
    config = GeneratorConfig(language="Rust", package_name="model")
    assert registry.create_generator("rust", config).config is config


def test_create_generator_failures(registry, tmp_path):
    with pytest.raises(RegistryError, match="Invalid config type"):
        registry.create_generator("rust", 42)
    with pytest.raises(RegistryError, match="Failed to create rust generator"):
        registry.create_generator("rust", tmp_path / "missing.json")


def test_language_info(registry):
    info = registry.get_language_info("rs")
    assert info == {
        "name": "Rust",
        "class": "RustGenerator",
        "file_extension": ".rs",
        "aliases": ["rs"],
        "module": __name__,
    }
