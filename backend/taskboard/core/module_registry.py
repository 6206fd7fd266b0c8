import importlib
import pkgutil
from typing import List
from .module_base import BaseModule

registered_modules: List[BaseModule] = []

def discover_modules():
    """
    Findet interne Module unter taskboard.modules.* automatisch.

    Erwartung:
    - Jedes Modul liegt unter taskboard/modules/<name>/
    - Es gibt eine module.py mit einer Variable "module",
      die eine Instanz von BaseModule enthält.
    """
    registered_modules.clear()
    from taskboard import modules

    for _finder, name, _ispkg in pkgutil.iter_modules(modules.__path__, modules.__name__ + "."):
        try:
            mod = importlib.import_module(name + ".module")
        except ModuleNotFoundError:
            continue

        candidate = getattr(mod, "module", None)
        if isinstance(candidate, BaseModule):
            registered_modules.append(candidate)

def init_all_modules(app):
    """Ruft init_app() für alle registrierten Module auf."""
    for m in registered_modules:
        m.init_app(app)
        app.logger.debug("Modul %s initialisiert", m.id)
