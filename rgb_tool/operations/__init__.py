"""Colour operations, one module per rgb-tool subcommand.

Each module defines a module-level `operation` (rgb_tool.core.types.Operation)
and documents itself in its module docstring. rgb_tool.registry imports them
on first use.
"""
