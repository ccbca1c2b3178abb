import logging

from flask import Blueprint, Flask, Response, current_app, request
from werkzeug.exceptions import BadRequest

from .config import Settings
from .errors import TaskDecodeError, TaskNotFoundError
from .models import Task
from .store import TaskStore, seeded_store

logger = logging.getLogger(__name__)

tasks = Blueprint("tasks", __name__)

STORE_KEY = "task_store"


def get_store() -> TaskStore:
    return current_app.extensions[STORE_KEY]


def _reject_constant(name):
    raise ValueError(f"invalid JSON literal {name!r}")


def read_task() -> Task:
    try:
        raw = request.get_data(cache=False)
    except (OSError, BadRequest) as exc:
        raise TaskDecodeError(f"failed to read request body: {exc}") from exc
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TaskDecodeError(f"request body is not valid UTF-8: {exc}") from exc
    try:
        data = current_app.json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise TaskDecodeError(f"invalid JSON: {exc}") from exc
    return Task.from_dict(data)


def dump_json(payload) -> bytes:
    return current_app.json.dumps(payload, separators=(",", ":")).encode("utf-8")


def json_response(body=b"", status=200):
    return Response(body, status=status, mimetype=current_app.json.mimetype)


def error_response(message, status):
    resp = Response(f"{message}\n", status=status, mimetype="text/plain")
    resp.headers["X-Content-Type-Options"] = "nosniff"
    return resp


# 查看所有任务
@tasks.route('/tasks', methods=['GET'])
def get_tasks():
    snapshot = get_store().list_all()
    try:
        body = dump_json({task_id: task.to_dict() for task_id, task in snapshot.items()})
    except (TypeError, ValueError) as exc:
        logger.error("failed to encode task list: %s", exc)
        return error_response(str(exc), 500)
    return json_response(body, 200)


# 添加或替换任务
@tasks.route('/tasks', methods=['POST'])
def post_task():
    try:
        task = read_task()
    except TaskDecodeError as exc:
        logger.info("rejected task: %s", exc)
        return error_response(str(exc), 400)

    get_store().put(task)
    return json_response(status=201)


# 按 id 查看任务
@tasks.route('/tasks/<task_id>', methods=['GET'])
def get_task(task_id):
    try:
        task = get_store().get(task_id)
    except TaskNotFoundError as exc:
        logger.info("task id=%r not found", task_id)
        return error_response(str(exc), 400)

    try:
        body = dump_json(task.to_dict())
    except (TypeError, ValueError) as exc:
        logger.error("failed to encode task id=%r: %s", task_id, exc)
        return error_response(str(exc), 400)
    return json_response(body, 200)


# 删除任务
@tasks.route('/tasks/<task_id>', methods=['DELETE'])
def delete_task(task_id):
    try:
        get_store().delete(task_id)
    except TaskNotFoundError as exc:
        logger.info("task id=%r not found", task_id)
        return error_response(str(exc), 400)
    return json_response(status=200)


def create_app(store=None, settings=None) -> Flask:
    settings = settings or Settings()
    if store is None:
        store = seeded_store() if settings.seed else TaskStore()

    app = Flask(settings.app_name)
    # field order and non-ASCII text go out as stored
    app.json.sort_keys = False
    app.json.ensure_ascii = False
    app.json.compact = True

    app.extensions[STORE_KEY] = store
    app.register_blueprint(tasks)
    return app
