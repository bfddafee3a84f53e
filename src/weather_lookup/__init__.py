"""Command-line weather lookup through named provider credentials."""

__version__ = "0.1.0"
