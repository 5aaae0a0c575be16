"""Qt integration: the MDI editor host, quick-open dialog and launcher window."""

from importlib import import_module
from typing import Any

__all__ = ["main_window", "mdi_host", "quick_open"]


def __getattr__(name: str) -> Any:
	if name in __all__:
		module = import_module(f"{__name__}.{name}")
		globals()[name] = module
		return module
	raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
