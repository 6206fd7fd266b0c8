from typing import Any, Mapping, Optional

HOST = "0.0.0.0"
PORT = 8080


def load_config(app, overrides: Optional[Mapping[str, Any]] = None):
    """Lädt die feste Basis-Konfiguration für den Taskboard-Service.

    Es werden bewusst keine Umgebungsvariablen gelesen; ``overrides`` ist nur
    für Tests gedacht (z. B. ``TESTING=True``).
    """
    app.config["HOST"] = HOST
    app.config["PORT"] = PORT
    app.config["DEBUG"] = False
    # Felder in der Reihenfolge id, title, done ausgeben
    app.json.sort_keys = False

    if overrides:
        app.config.update(overrides)
