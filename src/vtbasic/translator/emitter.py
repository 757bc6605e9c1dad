"""
C Source Emitter
================

Accumulates generated C text in two ordered buffers:

- **header**: the include directive, the ``main`` preamble and the
  variable declarations, which must precede every statement
- **code**: the translated statements and the epilogue

The final text is the header followed by the code. Writing it to disk is
a separate step so the translator can be used without touching the file
system.
"""

import logging
from pathlib import Path
from typing import Optional, Union


logger = logging.getLogger(__name__)


class Emitter:
    """
    Append-only output buffers for generated C code.

    Example:
        emitter = Emitter("out.c")
        emitter.header_line("#include <stdio.h>")
        emitter.emit("x = ")
        emitter.emit_line("1;")
        emitter.write_file()

    Attributes:
        full_path: Destination for write_file() (optional)
    """

    def __init__(self, full_path: Optional[Union[str, Path]] = None):
        self.full_path = Path(full_path) if full_path is not None else None
        self._header: list[str] = []
        self._code: list[str] = []

    def emit(self, code: str) -> None:
        """Append a fragment to the code buffer."""
        self._code.append(code)

    def emit_line(self, code: str) -> None:
        """Append a fragment that ends a line to the code buffer."""
        self._code.append(code + "\n")

    def header_line(self, code: str) -> None:
        """Append a line to the header buffer."""
        self._header.append(code + "\n")

    @property
    def header(self) -> str:
        return "".join(self._header)

    @property
    def code(self) -> str:
        return "".join(self._code)

    def finalize(self) -> str:
        """Return the generated text: header followed by code."""
        return self.header + self.code

    def write_file(self, path: Optional[Union[str, Path]] = None) -> Path:
        """
        Write the generated text to disk.

        Args:
            path: Destination file (defaults to full_path)

        Returns:
            The path written

        Raises:
            ValueError: If no destination was given
            OSError: If the file cannot be written
        """
        target = Path(path) if path is not None else self.full_path
        if target is None:
            raise ValueError("no output path given for emitter")

        text = self.finalize()
        target.write_text(text, encoding="utf-8", newline="\n")
        logger.debug(f"Wrote {len(text)} bytes to {target}")
        return target
