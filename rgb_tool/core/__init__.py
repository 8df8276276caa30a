"""rgb_tool.core — Foundation layer.

Contains the Color value type, the constant palettes, shared types,
configuration and the report builder.
This module has NO dependencies on rgb_tool.operations or rgb_tool.registry.
"""

from rgb_tool.core.color import Color, ParseError, parse_hex

__all__ = ['Color', 'ParseError', 'parse_hex']
