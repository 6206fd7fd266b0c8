from abc import ABC, abstractmethod


class BaseModule(ABC):
    """
    Basisklasse für alle Module.

    Ein Modul ist dann gültig, wenn es:
    - eine eindeutige id hat
    - einen Namen
    - init_app implementiert
    """

    id: str
    name: str
    version: str = "0.1.0"

    @abstractmethod
    def init_app(self, app):
        """Blueprints registrieren, ggf. Stores anlegen."""
        raise NotImplementedError
