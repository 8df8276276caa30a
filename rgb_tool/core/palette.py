"""Constant colour palettes and palette-token resolution.

BASIC is the plain RGB set, BOOTSTRAP the Bootstrap 5.2 brand colours
(https://getbootstrap.com/docs/5.2/customize/color/).
"""

from types import MappingProxyType

from rgb_tool.core.color import Color, parse_hex

# Basic RGB colours
RED = Color(0xFF0000FF)
GREEN = Color(0x00FF00FF)
BLUE = Color(0x0000FFFF)
YELLOW = Color(0xFFFF00FF)
CYAN = Color(0x00FFFFFF)
MAGENTA = Color(0xFF00FFFF)
BLACK = Color(0x000000FF)
SILVER = Color(0xC0C0C0FF)
GRAY = Color(0x808080FF)
WHITE = Color(0xFFFFFFFF)
NONE = Color(0x00000000)  # fully transparent

BASIC = MappingProxyType(
    {
        'red': RED,
        'green': GREEN,
        'blue': BLUE,
        'yellow': YELLOW,
        'cyan': CYAN,
        'magenta': MAGENTA,
        'black': BLACK,
        'silver': SILVER,
        'gray': GRAY,
        'white': WHITE,
        'none': NONE,
    }
)

# Bootstrap 5.2
BS_BLUE = Color(0x0D6EFDFF)
BS_INDIGO = Color(0x6610F2FF)
BS_PURPLE = Color(0x6F42C1FF)
BS_PINK = Color(0xD63384FF)
BS_RED = Color(0xDC3545FF)
BS_ORANGE = Color(0xFD7E14FF)
BS_YELLOW = Color(0xFFC107FF)
BS_GREEN = Color(0x198754FF)
BS_TEAL = Color(0x20C997FF)
BS_CYAN = Color(0x0DCAF0FF)
BS_BLACK = Color(0x000000FF)
BS_GRAY = Color(0xADB5BDFF)
BS_WHITE = Color(0xFFFFFFFF)

BOOTSTRAP = MappingProxyType(
    {
        'blue': BS_BLUE,
        'indigo': BS_INDIGO,
        'purple': BS_PURPLE,
        'pink': BS_PINK,
        'red': BS_RED,
        'orange': BS_ORANGE,
        'yellow': BS_YELLOW,
        'green': BS_GREEN,
        'teal': BS_TEAL,
        'cyan': BS_CYAN,
        'black': BS_BLACK,
        'gray': BS_GRAY,
        'white': BS_WHITE,
    }
)

PALETTES = MappingProxyType({'basic': BASIC, 'bs': BOOTSTRAP})


def resolve(token: str) -> Color | None:
    """Resolve a colour token from the command line.

    Accepts 'bs.blue', 'basic.red', a bare basic name ('red'), or a hex
    literal ('#0D6EFD', 'abc'). Names are case-insensitive.
    Returns None if the token matches nothing.
    """
    token = token.strip()
    if '.' in token:
        prefix, _, name = token.partition('.')
        palette = PALETTES.get(prefix.lower())
        if palette is None:
            return None
        return palette.get(name.lower())
    named = BASIC.get(token.lower())
    if named is not None:
        return named
    return parse_hex(token)
