from flask import Flask
from .core.config import load_config
from .core.module_registry import discover_modules, init_all_modules


def create_app(task_store=None, config=None):
    app = Flask(__name__)
    load_config(app, config)

    # Store injizieren, sonst legt das Tasks-Modul einen eigenen an
    if task_store is not None:
        app.extensions["task_store"] = task_store

    # Module entdecken & initialisieren
    discover_modules()
    init_all_modules(app)

    return app
