import logging
from typing import Any

from flask import Blueprint, Response, current_app, jsonify, request
from pydantic import ValidationError

from sms_notifier.config import SmscConfig
from sms_notifier.log import LoggerBuildLog
from sms_notifier.models import BuildOutcome
from sms_notifier.notifier import BuildNotifier
from sms_notifier.phone import check_recipients

logger = logging.getLogger(__name__)

bp = Blueprint("notifier", __name__)


def _error(message: str, status: int, **extra: Any) -> tuple[Response, int]:
    body: dict[str, Any] = {"error": message}
    body.update(extra)
    return jsonify(body), status


@bp.post("/notifications")
def post_notification() -> tuple[Response, int]:
    body = request.get_json(silent=True)
    if body is None:
        return _error("Request body must be valid JSON", 400)

    if not isinstance(body, dict):
        return _error("Request body must be a JSON object", 400)

    recipients = body.get("recipients")
    build = body.get("build")

    if recipients is None or build is None:
        return _error("Both 'recipients' and 'build' are required", 400)

    if not isinstance(recipients, str):
        return _error("'recipients' must be a string", 400)

    try:
        outcome = BuildOutcome.model_validate(build)
    except ValidationError as exc:
        return _error(
            "Build validation failed",
            400,
            details=exc.errors(include_url=False),
        )

    notifier: BuildNotifier = current_app.extensions["build_notifier"]
    smsc_config: SmscConfig = current_app.extensions["smsc_config"]
    build_log = LoggerBuildLog(
        logger,
        {"project": outcome.project_name, "build_number": outcome.number},
    )

    results = notifier.notify(
        outcome,
        recipients,
        smsc_config.credentials(),
        build_log,
    )

    # Sending problems never fail the build step, so this is always 200.
    return jsonify({
        "status": "completed",
        "results": [
            {"recipient": r.recipient, "success": r.success, "error": r.error}
            for r in results
        ],
    }), 200


@bp.get("/recipients/check")
def check_recipients_field() -> tuple[Response, int]:
    validation = check_recipients(request.args.get("value"))
    return jsonify({
        "kind": str(validation.kind),
        "message": validation.message,
    }), 200


@bp.get("/health")
def health() -> tuple[Response, int]:
    smsc_config: SmscConfig = current_app.extensions["smsc_config"]
    credentials_ok = smsc_config.credentials().is_complete

    return jsonify({
        "status": "healthy",
        "checks": {"credentials": "ok" if credentials_ok else "missing"},
    }), 200
