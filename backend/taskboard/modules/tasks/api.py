from flask import Blueprint, current_app, jsonify, request

from .schema import TaskDecodeError, decode_task
from .store import TaskStore

bp = Blueprint("tasks", __name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
    "Vary": "Origin",
    "Access-Control-Max-Age": "86400",
}

# Alles außer GET/POST/OPTIONS muss die View erreichen, um 405 zu liefern
HANDLED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]

TEXT_PLAIN = {"Content-Type": "text/plain; charset=utf-8"}


def _get_store() -> TaskStore:
    store = current_app.extensions.get("task_store")
    if store is None:
        raise RuntimeError("task_store fehlt")
    return store


@bp.after_request
def apply_cors(response):
    for key, value in CORS_HEADERS.items():
        response.headers[key] = value
    return response


def list_tasks():
    tasks = _get_store().list()
    if not tasks:
        return current_app.response_class("[]", mimetype="application/json")
    return jsonify([task.to_dict() for task in tasks])


def create_task():
    try:
        decoded = decode_task(request.get_data(as_text=True))
    except TaskDecodeError as exc:
        current_app.logger.debug("Task abgelehnt: %s", exc)
        return str(exc), 400, TEXT_PLAIN

    title = decoded.title.strip()
    if not title:
        current_app.logger.debug("Task abgelehnt: leerer Titel")
        return "title is required", 400, TEXT_PLAIN

    task = _get_store().append(title, decoded.done)
    current_app.logger.debug("Task %s angelegt", task.id)
    return jsonify(task.to_dict()), 201


def tasks_endpoint():
    if request.method == "OPTIONS":
        return "", 200
    if request.method == "GET":
        return list_tasks()
    if request.method == "POST":
        return create_task()
    return "Method not allowed", 405, TEXT_PLAIN


bp.add_url_rule(
    "/tasks",
    view_func=tasks_endpoint,
    methods=HANDLED_METHODS,
    provide_automatic_options=False,
)
