"""Render a colour and its shade/tint ramp as a PNG strip.

Writes <out_dir>/<RRGGBBAA>.png: --steps darkened blocks (darkest
first), the colour itself, then --steps lightened blocks. Ramp factors
are k / (steps + 1) for k = 1..steps, with at most 32 steps. Each block
is a flat square of RGB_TOOL_SWATCH_SIZE pixels (default 64, at most
512); alpha is kept.

Example:
    rgb-tool swatch bs.blue --out-dir ./tmp --steps 3
"""

import os

import numpy as np
from PIL import Image

from rgb_tool.core.color import Color
from rgb_tool.core.types import Operation, Report

operation = Operation(
    name='swatch',
    help='Write a PNG strip of the colour with its darken/lighten ramp.',
)

DEFAULT_STEPS = 4
DEFAULT_SIZE = 64
MAX_STEPS = 32
MAX_SIZE = 512


def ramp(colour: Color, steps: int) -> list[Color]:
    """Darkest shade first, then colour, then tints up to the lightest."""
    factors = [k / (steps + 1) for k in range(1, steps + 1)]
    shades = [colour.darken(f) for f in reversed(factors)]
    tints = [colour.lighten(f) for f in factors]
    return shades + [colour] + tints


def render(colours: list[Color], size: int) -> Image.Image:
    """Lay colours out left to right as size x size RGBA blocks."""
    strip = np.zeros((size, size * len(colours), 4), dtype=np.uint8)
    for i, c in enumerate(colours):
        strip[:, i * size : (i + 1) * size] = c.channels_with_alpha
    return Image.fromarray(strip)


@operation.run
def run(colour: Color, report: Report, args) -> None:
    steps = getattr(args, 'steps', None)
    steps = DEFAULT_STEPS if steps is None else steps
    if not 0 <= steps <= MAX_STEPS:
        raise ValueError(f'--steps must be between 0 and {MAX_STEPS}, got {steps}')
    size = getattr(args, 'size', None) or DEFAULT_SIZE
    if size > MAX_SIZE:
        raise ValueError(f'swatch block size must be at most {MAX_SIZE} pixels, got {size}')
    out_dir = getattr(args, 'out_dir', None) or '.'

    colours = ramp(colour, steps)
    image = render(colours, size)
    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, f'{colour.to_hex()[1:]}.png')
    image.save(path)
    report.add(
        'swatch',
        {
            'file': path,
            'width': image.width,
            'height': image.height,
            'blocks': [c.to_hex() for c in colours],
        },
    )
