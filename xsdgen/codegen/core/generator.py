"""
Base generator interface for all code generation targets.

Every language generator is driven by the same loop: each parsed
declaration is handed to the handler for its kind. Handlers are optional;
a generator only implements the kinds it supports and the rest are
skipped.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from ...logging_config import get_logger
from ...utils import prepare_output_dir
from .builtins import Language
from .config import GeneratorConfig
from .resolver import DeclarationIndex, resolve_native_type
from .schema import Declaration, DeclarationKind

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


# Handler method looked up for each declaration kind
HANDLER_NAMES: Dict[DeclarationKind, str] = {
    DeclarationKind.SIMPLE_TYPE: "on_simple_type",
    DeclarationKind.ATTRIBUTE: "on_attribute",
    DeclarationKind.ELEMENT: "on_element",
    DeclarationKind.COMPLEX_TYPE: "on_complex_type",
    DeclarationKind.GROUP: "on_group",
    DeclarationKind.ATTRIBUTE_GROUP: "on_attribute_group",
}


def call_by_name(receiver: Any, name: str, *args: Any) -> Any:
    """
    Call the method ``name`` on ``receiver`` if it has one.

    A missing method is not an error: nothing is called and None is
    returned. Exceptions raised by the method propagate unchanged, and so
    does the TypeError of a call with the wrong arguments.

    Args:
        receiver: Object to look the method up on
        name: Method name
        *args: Positional arguments for the call

    Returns:
        Whatever the method returns, or None when there is no such method
    """
    method = getattr(receiver, name, None)
    if method is None or not callable(method):
        return None
    return method(*args)


def dispatch(generator: Any, declaration: Declaration) -> Any:
    """Hand ``declaration`` to the generator's handler for its kind."""
    handler_name = HANDLER_NAMES.get(declaration.kind)
    if handler_name is None:
        logger.debug("No handler for declaration %r", declaration.name)
        return None
    return call_by_name(generator, handler_name, declaration)


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig(language=self.language.value)
        self.declarations: List[Declaration] = []
        self._index: Optional[DeclarationIndex] = None
        self._output: List[str] = []

    @property
    @abstractmethod
    def language(self) -> Language:
        """Return the target language."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.go', '.ts')."""
        pass

    @property
    def language_name(self) -> str:
        return self.language.value

    # Optional handlers, one per declaration kind

    def on_simple_type(self, declaration) -> None:
        pass

    def on_attribute(self, declaration) -> None:
        pass

    def on_element(self, declaration) -> None:
        pass

    def on_complex_type(self, declaration) -> None:
        pass

    def on_group(self, declaration) -> None:
        pass

    def on_attribute_group(self, declaration) -> None:
        pass

    # Hooks around the driver loop

    def begin(self, declarations: List[Declaration]) -> None:
        """Prepare for a run over ``declarations``."""
        self.declarations = declarations
        self._index = DeclarationIndex(declarations)
        self._output = []

    def finish(self) -> str:
        """Return the code emitted during the run."""
        return "".join(self._output)

    def emit(self, code: str) -> None:
        """Append generated code to the output."""
        self._output.append(code)

    def native_type(self, name: str) -> str:
        """Spell a referenced type name in the target language."""
        declarations = self._index if self._index is not None else self.declarations
        return resolve_native_type(name, declarations, self.language)

    def validate_declarations(self, declarations: List[Declaration]) -> List[str]:
        """
        Check declarations for issues worth reporting before generation.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        seen = set()

        for declaration in declarations:
            kind = declaration.kind.value if declaration.kind else "declaration"
            key = (declaration.kind, declaration.name)
            if key in seen:
                warnings.append(
                    f"Duplicate {kind} '{declaration.name}', "
                    "first declaration wins"
                )
            seen.add(key)

        return warnings


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: Any, declarations: Iterable[Optional[Declaration]]
) -> GenerationResult:
    """
    Run ``generator`` over ``declarations`` with error handling.

    Declarations are dispatched in order; None entries are skipped.

    Args:
        generator: Code generator instance
        declarations: Parsed declarations

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    declarations = [d for d in declarations if d is not None]
    language = getattr(generator, "language_name", type(generator).__name__)

    try:
        warnings = call_by_name(generator, "validate_declarations", declarations) or []
        call_by_name(generator, "begin", declarations)

        handled: Dict[str, int] = {}
        for declaration in declarations:
            dispatch(generator, declaration)
            if declaration.kind is None:
                continue
            kind = declaration.kind.value
            handled[kind] = handled.get(kind, 0) + 1

        code = call_by_name(generator, "finish") or ""

    except Exception as e:
        logger.error("Code generation for %s failed: %s", language, e)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)

    metadata = {
        "language": language,
        "file_extension": getattr(generator, "file_extension", ""),
        "declaration_count": len(declarations),
        "declarations_by_kind": handled,
    }
    logger.info("Generated %s code for %d declarations", language, len(declarations))
    return GenerationResult(code, warnings, metadata)


def write_output(
    result: GenerationResult, output_dir: str, file_name: str
) -> Path:
    """
    Write a successful generation result to ``output_dir/file_name``.

    Raises:
        GeneratorError: If the result is a failure or the file can't be written
    """
    if not result.success:
        raise GeneratorError(f"Refusing to write failed result: {result.error_message}")

    try:
        prepare_output_dir(output_dir)
        path = Path(output_dir or ".") / file_name
        path.write_text(result.code, encoding="utf-8")
    except OSError as e:
        raise GeneratorError(f"Failed to write {file_name}: {e}") from e

    logger.info("Wrote %s", path)
    return path

