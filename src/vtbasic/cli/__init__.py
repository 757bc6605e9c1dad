"""
VTBasic Command-Line Interface
==============================

- **vtbc**: BASIC to C compiler

Implemented as a Click-based CLI application with help and error
reporting.
"""

__all__ = ["vtbc"]
