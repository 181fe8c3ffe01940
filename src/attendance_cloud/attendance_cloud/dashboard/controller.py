from __future__ import annotations

import json
import queue

from flask import Flask, Response, jsonify, request, stream_with_context

from ..common.responses import domain_error_response, error_response
from ..core.enums import ErrorCode
from ..core.exceptions import DomainError
from ..container import Container


def _sse(payload: dict) -> str:
    return f"data: {json.dumps(payload)}\n\n"


def _offer_latest(updates: queue.Queue, payload: dict) -> None:
    """Keep only the newest frame; each one carries the full visible set."""
    while True:
        try:
            updates.put_nowait(payload)
            return
        except queue.Full:
            try:
                updates.get_nowait()
            except queue.Empty:
                pass


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard/today", methods=["GET"], endpoint="dashboard_today")
    def dashboard_today():
        try:
            logs, stats = container.dashboard_service.snapshot_today(request.args.get("schoolId", ""))
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            app.logger.exception("Dashboard snapshot failed")
            return error_response(ErrorCode.INTERNAL, "Unable to load today's attendance")

        return jsonify({"logs": [log.to_dict() for log in logs], "stats": stats.to_dict()}), 200

    @app.route("/api/dashboard/live", methods=["GET"], endpoint="dashboard_live")
    def dashboard_live():
        """Server-sent events: one `data:` frame per snapshot, full visible set each time."""
        school_id = request.args.get("schoolId", "")
        updates: queue.Queue = queue.Queue(maxsize=1)

        def on_update(logs, stats):
            _offer_latest(updates, {"logs": [log.to_dict() for log in logs], "stats": stats.to_dict()})

        def on_error(exc):
            _offer_latest(updates, {"error": {"status": ErrorCode.INTERNAL.canonical_name, "message": "Live update failed"}})

        subscription = container.dashboard_service.listen_to_live_today(school_id, on_update, on_error)
        if subscription is None:
            return error_response(ErrorCode.INVALID_ARGUMENT, "schoolId is required")

        keepalive = float(app.config.get("SSE_KEEPALIVE_SECONDS", 15))

        def generate():
            try:
                while True:
                    try:
                        payload = updates.get(timeout=keepalive)
                    except queue.Empty:
                        yield ": keep-alive\n\n"
                        continue
                    yield _sse(payload)
            finally:
                subscription.unsubscribe()
                app.logger.debug("Live monitor closed for school=%s", school_id)

        return Response(
            stream_with_context(generate()),
            mimetype="text/event-stream",
            headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
        )
