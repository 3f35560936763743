"""
consciousness_assessor.reporting — Terminal formatting and file export.

Modules:
  formatters — Plain-text formatters for Typer CLI output.
  export     — JSON/CSV export of assessment results.
"""
