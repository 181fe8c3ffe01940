from __future__ import annotations

import csv
import io
from datetime import date, timedelta

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.responses import domain_error_response, error_response
from ..core.constants import DEFAULT_HISTORY_DAYS
from ..core.enums import ErrorCode
from ..core.exceptions import DomainError, InvalidArgumentError
from ..container import Container

HISTORY_CSV_FIELDS = [
    "id",
    "date",
    "time",
    "student_id",
    "name",
    "class_name",
    "grade_name",
    "status",
    "verified_by",
]


def register(app: Flask, container: Container) -> None:
    @app.route("/secureCheckIn", methods=["POST"], endpoint="secure_check_in")
    def secure_check_in():
        """Callable endpoint: body `{"data": {...}}`, reply `{"result": {...}}`."""
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return error_response(ErrorCode.INVALID_ARGUMENT, "Request body must be a JSON object")

        payload = body.get("data", body)
        if not isinstance(payload, dict):
            return error_response(ErrorCode.INVALID_ARGUMENT, "Request data must be an object")

        try:
            result = container.checkin_service.secure_check_in(payload)
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            app.logger.exception("Unhandled error in secureCheckIn")
            return error_response(ErrorCode.INTERNAL, "Server failed to record attendance")

        return jsonify({"result": result.to_dict()}), 200

    def _history_range() -> tuple[date, date]:
        today = now_local(container.tz).date()
        end_s = request.args.get("end")
        start_s = request.args.get("start")
        try:
            end = parse_iso_date(end_s) if end_s else today
            start = parse_iso_date(start_s) if start_s else end - timedelta(days=DEFAULT_HISTORY_DAYS)
        except ValueError:
            raise InvalidArgumentError("start/end must be YYYY-MM-DD") from None
        return start, end

    def _load_history():
        start, end = _history_range()
        records = container.history_service.fetch_history(
            school_id=request.args.get("schoolId", ""),
            start=start,
            end=end,
            class_name=request.args.get("className"),
        )
        return start, end, container.history_service.build_history_rows(records)

    @app.route("/api/attendance/history", methods=["GET"], endpoint="attendance_history")
    def attendance_history():
        try:
            start, end, rows = _load_history()
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            app.logger.exception("History query failed")
            return error_response(ErrorCode.INTERNAL, "Unable to load attendance history")

        return jsonify({"start": start.isoformat(), "end": end.isoformat(), "rows": rows}), 200

    @app.route("/api/attendance/history.csv", methods=["GET"], endpoint="attendance_history_csv")
    def attendance_history_csv():
        try:
            start, end, rows = _load_history()
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            app.logger.exception("History export failed")
            return error_response(ErrorCode.INTERNAL, "Unable to export attendance history")

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=HISTORY_CSV_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        filename = f"attendance_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.csv"
        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
