"""Find the renderers shipped in swatch_grid/renderers/.

A renderer module opts in by defining a module-level `renderer`
(a Renderer). Its module docstring becomes the renderer's long help,
shown by `swatch-grid help <name>`. Two modules claiming the same
renderer name is a packaging mistake and fails loudly.
"""

import importlib
import pkgutil

from swatch_grid.core.types import Renderer

_renderers: dict[str, Renderer] = {}


def _scan() -> None:
    import swatch_grid.renderers as pkg

    for info in pkgutil.iter_modules(pkg.__path__, prefix=f'{pkg.__name__}.'):
        if info.name.rpartition('.')[2].startswith('_'):
            continue
        module = importlib.import_module(info.name)
        found = getattr(module, 'renderer', None)
        if not isinstance(found, Renderer):
            continue
        if found.name in _renderers and _renderers[found.name] is not found:
            raise RuntimeError(f'Renderer {found.name!r} is defined twice (second in {info.name})')
        found.doc = (module.__doc__ or '').strip()
        _renderers[found.name] = found


def discover() -> dict[str, Renderer]:
    """Renderers keyed by name, scanned once per process."""
    if not _renderers:
        _scan()
    return _renderers


def get(name: str) -> Renderer:
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown renderer: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_renderers() -> dict[str, Renderer]:
    return discover()


def doc(name: str) -> str:
    """Long help for a renderer: its module docstring."""
    return get(name).doc
