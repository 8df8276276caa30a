"""rgb-tool — packed 32-bit RGBA colours: parse, transform, format."""

from rgb_tool.core.color import Color, ParseError, parse_hex

__version__ = '0.1.0'

__all__ = ['Color', 'ParseError', 'parse_hex', '__version__']
