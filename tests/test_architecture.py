"""Architecture checks: every module imports on its own, no cycles."""

from __future__ import annotations

import importlib
import sys

import pytest

_MODULES = [
    "sysbar.config",
    "sysbar.errors",
    "sysbar.units",
    "sysbar.models",
    "sysbar.models.snapshot",
    "sysbar.collectors.base",
    "sysbar.collectors.cpu_collector",
    "sysbar.collectors.host_collector",
    "sysbar.engine.aggregator",
    "sysbar.render.bar",
    "sysbar.render.console",
    "sysbar.main",
]


@pytest.mark.parametrize("module_name", _MODULES)
def test_no_circular_imports(module_name: str):
    """Each module can be imported independently without circular import errors."""
    saved = dict(sys.modules)
    for k in [k for k in sys.modules if k.startswith("sysbar")]:
        del sys.modules[k]
    try:
        importlib.import_module(module_name)
    except ImportError as e:
        if "circular" in str(e).lower():
            pytest.fail(f"Circular import detected in {module_name}: {e}")
        raise
    finally:
        sys.modules.update(saved)


def test_renderers_share_one_interface():
    from sysbar.render import ConsoleRenderer, Renderer, StatusBarRenderer
    assert issubclass(ConsoleRenderer, Renderer)
    assert issubclass(StatusBarRenderer, Renderer)
    assert ConsoleRenderer.name != StatusBarRenderer.name
