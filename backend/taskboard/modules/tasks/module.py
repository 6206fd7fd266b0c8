from taskboard.core.module_base import BaseModule
from .api import bp
from .store import TaskStore


class TasksModule(BaseModule):
    id = "tasks"
    name = "Tasks"
    version = "0.1.0"

    def init_app(self, app):
        # Ein von außen übergebener Store (Tests) hat Vorrang
        if app.extensions.get("task_store") is None:
            app.extensions["task_store"] = TaskStore()
        app.register_blueprint(bp)


module = TasksModule()
