"""
cscan Command-Line Interface
============================

- **cscan**: token listing for a source file

Implemented as a Click application with help and error reporting.
"""

__all__ = ["cscan"]
