"""Operation registry, keyed by subcommand name.

Every public module in rgb_tool/operations/ must define an `operation`
of type Operation. Modules are imported on the first call to discover();
a module without one, or two modules claiming the same name, is a
packaging error and raises RegistryError.
"""

import importlib
import pkgutil
from types import ModuleType

import rgb_tool.operations
from rgb_tool.core.types import Operation

_registry: dict[str, Operation] = {}


class RegistryError(RuntimeError):
    """An operation module is malformed."""


def _operation_of(module: ModuleType) -> Operation:
    op = getattr(module, 'operation', None)
    if not isinstance(op, Operation):
        raise RegistryError(f'{module.__name__} does not define an Operation named `operation`')
    return op


def _module_names() -> list[str]:
    return sorted(
        name
        for _finder, name, ispkg in pkgutil.iter_modules(rgb_tool.operations.__path__)
        if not ispkg and not name.startswith('_')
    )


def discover() -> dict[str, Operation]:
    """Import every operation module once and return the registry."""
    if _registry:
        return _registry

    found: dict[str, Operation] = {}
    for name in _module_names():
        op = _operation_of(importlib.import_module(f'{rgb_tool.operations.__name__}.{name}'))
        if op.name in found:
            raise RegistryError(f'operation {op.name!r} defined twice (second in module {name!r})')
        found[op.name] = op

    _registry.update(found)
    return _registry


def get(name: str) -> Operation:
    """Look up one operation; KeyError lists the available names."""
    reg = discover()
    try:
        return reg[name]
    except KeyError:
        raise KeyError(f'Unknown operation: {name}. Available: {", ".join(sorted(reg))}') from None


def all_operations() -> dict[str, Operation]:
    return discover()
