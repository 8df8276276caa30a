"""Shared types for rgb-tool: Operation and Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from rgb_tool.core.color import Color


class Operation:
    """A self-registering colour operation.

    Usage in an operation module:

        operation = Operation(name='lighten', help='Tint a colour toward white')

        @operation.run
        def run(colour, report, args):
            ...
    """

    def __init__(self, name: str, help: str = '', needs_colour: bool = True):
        self.name = name
        self.help = help
        self.needs_colour = needs_colour
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, colour: Color | None, report: Report, args: Any) -> None:
        """Execute the operation's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Operation {self.name} has no run function')
        self._run_fn(colour, report, args)


@dataclass
class Report:
    """Accumulates operation results for text/JSON output."""

    source: str = ''
    colour: Color | None = None
    results: dict[str, dict[str, Any]] = field(default_factory=dict)

    def add(self, operation_name: str, data: dict[str, Any]) -> None:
        """Add (or replace) the results of one operation."""
        self.results[operation_name] = data


def describe(colour: Color) -> dict[str, Any]:
    """The standard JSON-friendly description of a colour."""
    r, g, b, a = colour.channels_with_alpha
    return {'hex': colour.to_hex(), 'r': r, 'g': g, 'b': b, 'a': a}


def require_factor(args: Any, operation_name: str) -> float:
    """Return args.factor, or raise ValueError if it was not given."""
    factor = getattr(args, 'factor', None)
    if factor is None:
        raise ValueError(f'{operation_name} requires --factor')
    return float(factor)
