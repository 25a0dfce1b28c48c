"""Deferred imports for optional storage drivers."""

from collections.abc import Callable
from importlib import import_module

__all__ = [
    "lazy_import",
]


def lazy_import(
    module_name: str,
    name: str | None = None,
) -> Callable[[], object]:
    """Return a loader that imports ``module_name`` on first call.

    The driver is only required once a client actually connects, so
    importing ``vocab_srs`` works without Motor installed.

    Args:
        module_name: Dotted module path
        name: Attribute to fetch from the module, or None for the module itself

    Returns:
        Zero-argument callable returning the module or attribute
    """

    def _load() -> object:
        mod = import_module(module_name)
        return getattr(mod, name) if name else mod

    return _load
