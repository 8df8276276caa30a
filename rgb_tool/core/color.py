"""Packed 32-bit RGBA colour value.

Layout: [R:8][G:8][B:8][A:8], red in the most significant byte, alpha in the
least significant byte. Values are immutable; every transform returns a new
Color.

Float arithmetic is truncated toward zero before packing, so
Color.from_channels(13, 110, 253).lighten(0.5) gives (134, 182, 254).
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_HEX_DIGITS = re.compile(r'[0-9A-Fa-f]+')

# ITU-R BT.601 luma weights
_LUMA_R = 0.299
_LUMA_G = 0.587
_LUMA_B = 0.114


class ParseError(ValueError):
    """Raised when a hex colour literal cannot be decoded."""

    def __init__(self, text: str, reason: str):
        super().__init__(f'{reason}: {text!r}')
        self.text = text
        self.reason = reason


def _check_byte(name: str, value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f'{name} channel out of range 0..255: {value}')
    return value


def _clamp_factor(method: str, factor: float) -> float:
    if math.isnan(factor):
        logger.warning('Color.%s: factor is not a number, using 0', method)
        return 0.0
    if factor < 0.0:
        logger.warning('Color.%s: factor out of range: %s', method, factor)
        return 0.0
    if factor > 1.0:
        logger.warning('Color.%s: factor out of range: %s', method, factor)
        return 1.0
    return factor


@dataclass(frozen=True)
class Color:
    """A 32-bit RGBA colour."""

    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFFFFFFFF:
            raise ValueError(f'packed colour out of 32-bit range: {self.value:#x}')

    # -- construction ------------------------------------------------------

    @classmethod
    def from_channels(cls, r: int, g: int, b: int, a: int = 255) -> Color:
        """Pack four bytes. Alpha defaults to fully opaque."""
        r = _check_byte('red', r)
        g = _check_byte('green', g)
        b = _check_byte('blue', b)
        a = _check_byte('alpha', a)
        return cls((r << 24) | (g << 16) | (b << 8) | a)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Decode a hex literal, with or without a leading '#'.

        Accepted lengths after the '#':
          1  'A'         -> #AAAAAAFF
          3  'ABC'       -> #AABBCCFF
          4  'ABCD'      -> #AABBCCDD
          6  'ABCDEF'    -> #ABCDEFFF
          8  'ABCDEF88'  -> #ABCDEF88

        Raises ParseError('invalid length') for any other length and
        ParseError('invalid digit') for non-hex characters.
        """
        digits = text[1:] if text.startswith('#') else text
        n = len(digits)
        if n == 1:
            expanded = digits * 6 + 'FF'
        elif n == 3:
            expanded = ''.join(d * 2 for d in digits) + 'FF'
        elif n == 4:
            expanded = ''.join(d * 2 for d in digits)
        elif n == 6:
            expanded = digits + 'FF'
        elif n == 8:
            expanded = digits
        else:
            raise ParseError(text, 'invalid length')

        # int(..., 16) alone would also take '0x', '_', '+' and whitespace
        if not _HEX_DIGITS.fullmatch(digits):
            raise ParseError(text, 'invalid digit')
        return cls(int(expanded, 16))

    # -- accessors ---------------------------------------------------------

    @property
    def red(self) -> int:
        return (self.value >> 24) & 0xFF

    @property
    def green(self) -> int:
        return (self.value >> 16) & 0xFF

    @property
    def blue(self) -> int:
        return (self.value >> 8) & 0xFF

    @property
    def alpha(self) -> int:
        return self.value & 0xFF

    @property
    def channels(self) -> tuple[int, int, int]:
        """(R, G, B)."""
        return (self.red, self.green, self.blue)

    @property
    def channels_with_alpha(self) -> tuple[int, int, int, int]:
        """(R, G, B, A)."""
        return (self.red, self.green, self.blue, self.alpha)

    # -- serialization -----------------------------------------------------

    def to_hex(self) -> str:
        """'#' followed by 8 uppercase hex digits, RRGGBBAA."""
        return f'#{self.value:08X}'

    def __str__(self) -> str:
        return self.to_hex()

    def __int__(self) -> int:
        return self.value

    # -- transforms --------------------------------------------------------

    def lighten(self, factor: float) -> Color:
        """Move RGB toward white. 0 keeps the colour, 1 gives white.

        The factor is clamped to [0, 1]. Alpha is unchanged.
        """
        factor = _clamp_factor('lighten', factor)
        r, g, b, a = self.channels_with_alpha
        return Color.from_channels(
            int(r + (255 - r) * factor),
            int(g + (255 - g) * factor),
            int(b + (255 - b) * factor),
            a,
        )

    def darken(self, factor: float) -> Color:
        """Move RGB toward black. 0 keeps the colour, 1 gives black.

        The factor is clamped to [0, 1]. Alpha is unchanged.
        """
        factor = _clamp_factor('darken', factor)
        r, g, b, a = self.channels_with_alpha
        return Color.from_channels(
            int(r * (1 - factor)),
            int(g * (1 - factor)),
            int(b * (1 - factor)),
            a,
        )

    def opacify(self, factor: float) -> Color:
        """Return a copy with alpha set to 255 * factor.

        The product is truncated and then wrapped to 8 bits, it is not
        clamped: opacify(2.0) gives alpha 0xFE, not 0xFF. Infinite or NaN
        factors give alpha 0. Factors outside [0, 1] are logged.
        """
        if not 0.0 <= factor <= 1.0:
            logger.warning('Color.opacify: factor out of range: %s', factor)
        product = 255 * factor
        alpha = int(product) & 0xFF if math.isfinite(product) else 0
        r, g, b = self.channels
        return Color.from_channels(r, g, b, alpha)

    def grayscale(self) -> Color:
        """Luma-weighted gray with R = G = B. Alpha is preserved."""
        r, g, b, a = self.channels_with_alpha
        y = min(int(r * _LUMA_R + g * _LUMA_G + b * _LUMA_B), 255)
        return Color.from_channels(y, y, y, a)

    def luminance(self) -> int:
        """The gray level grayscale() would assign to each channel."""
        return self.grayscale().red


def parse_hex(text: str) -> Color | None:
    """Like Color.from_hex, but returns None on malformed input."""
    try:
        return Color.from_hex(text)
    except ParseError as e:
        logger.debug('parse_hex: %s', e)
        return None
