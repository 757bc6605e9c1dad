"""
BASIC Compiler Main Module
==========================

Drives a complete translation:

    Source → Lexer → Translator → Emitter → C source

Usage
-----
Command line:
    $ vtbc hello.bas

Programmatic:
    >>> from vtbasic.translator import translate
    >>> c_code = translate('PRINT "hello"')

Generated C
-----------
The output is a single ``main`` function: one include directive, the
function opening, one ``float`` declaration per variable in first-use
order, the translated statements, ``return 0;`` and the closing brace.

Error Handling
--------------
The first lexical, syntax or semantic error aborts the translation and
propagates as a BasicError subclass.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from vtbasic.translator.lexer import Lexer
from vtbasic.translator.emitter import Emitter
from vtbasic.translator.translator import Translator


logger = logging.getLogger(__name__)

# Written to the working directory unless overridden
DEFAULT_OUTPUT = "out.c"


@dataclass
class CompilerOptions:
    """
    Compiler configuration options.

    Attributes:
        output_path: Where compile_file() writes the generated C
        write_output: If False, compile_file() only returns the result
    """
    output_path: str = DEFAULT_OUTPUT
    write_output: bool = True


@dataclass
class CompilerResult:
    """
    Result of a translation.

    Attributes:
        filename: Source filename
        success: True if translation succeeded
        output: Generated C source (if successful)
        token_count: Number of tokens read from the lexer
        variables: Declared variables in first-use order
        labels: Declared labels in declaration order
        output_path: File the output was written to, if any
    """
    filename: str = ""
    success: bool = False
    output: str = ""
    token_count: int = 0
    variables: list[str] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)
    output_path: Optional[Path] = None


class BasicCompiler:
    """
    BASIC to C compiler.

    Example:
        compiler = BasicCompiler()
        result = compiler.compile_file("hello.bas")
        print(result.output)

    Attributes:
        options: Compiler configuration options
    """

    def __init__(self, options: Optional[CompilerOptions] = None):
        self.options = options or CompilerOptions()

    def compile_source(self, source: str, filename: str = "<input>") -> CompilerResult:
        """
        Translate BASIC source code to C.

        Args:
            source: BASIC source code string
            filename: Source filename for error messages

        Returns:
            CompilerResult containing the generated C

        Raises:
            BasicError: If translation fails
        """
        result, _ = self._translate(source, filename)
        return result

    def compile_file(self, filepath: Union[str, Path]) -> CompilerResult:
        """
        Translate a BASIC source file and, if configured, write the C output.

        Args:
            filepath: Path to the BASIC source file

        Returns:
            CompilerResult containing the generated C

        Raises:
            BasicError: If translation fails
            FileNotFoundError: If source file not found
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        source = path.read_text(encoding="utf-8")
        result, emitter = self._translate(source, str(path))

        if self.options.write_output:
            result.output_path = emitter.write_file(self.options.output_path)

        return result

    def _translate(self, source: str, filename: str) -> tuple[CompilerResult, Emitter]:
        """Run one translation with fresh lexer, emitter and symbol tables."""
        logger.debug(f"Translating {filename} ({len(source)} characters)")

        lexer = Lexer(source, filename)
        emitter = Emitter(self.options.output_path)
        translator = Translator(lexer, emitter)
        translator.program()

        result = CompilerResult(
            filename=filename,
            success=True,
            output=emitter.finalize(),
            token_count=translator.token_count,
            variables=list(translator.variables),
            labels=list(translator.labels_declared),
        )
        logger.debug(
            f"Translated {filename}: {result.token_count} tokens, "
            f"{len(result.variables)} variables, {len(result.labels)} labels"
        )
        return result, emitter


# =============================================================================
# Convenience Functions
# =============================================================================

def translate(source: str, filename: str = "<input>") -> str:
    """
    Translate BASIC source code to C.

    This is the primary high-level interface.

    Args:
        source: BASIC source code
        filename: Source filename for error messages

    Returns:
        Generated C source

    Raises:
        BasicError: If translation fails

    Example:
        >>> print(translate('LET a = 5\\nPRINT a'))
    """
    return BasicCompiler().compile_source(source, filename).output


def translate_file(
    filepath: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
) -> str:
    """
    Translate a BASIC source file, writing the C output to disk.

    Args:
        filepath: Path to BASIC source file
        output_path: Output file (default: out.c in the working directory)

    Returns:
        Generated C source
    """
    options = CompilerOptions(output_path=str(output_path or DEFAULT_OUTPUT))
    return BasicCompiler(options).compile_file(filepath).output
