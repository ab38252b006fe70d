from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date, parse_iso_datetime
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import AttendanceStatus, EventType
from ..core.exceptions import (
    DomainError,
    DuplicateCheckIn,
    DuplicateCheckOut,
    EmployeeInactive,
    EmployeeNotFound,
    MissingCheckIn,
    RecordNotFound,
    StorageError,
    ValidationError,
)
from ..container import Container

logger = logging.getLogger(__name__)

_STATUS_CODES = {
    ValidationError: 400,
    EmployeeInactive: 403,
    EmployeeNotFound: 404,
    RecordNotFound: 404,
    DuplicateCheckIn: 409,
    DuplicateCheckOut: 409,
    MissingCheckIn: 409,
}


def _status_code(error: DomainError) -> int:
    for exc_type, code in _STATUS_CODES.items():
        if isinstance(error, exc_type):
            return code
    return 400


def _failure(code: str, message: str, status: int):
    return jsonify({"success": False, "error": code, "message": message}), status


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def json_api(view):
        """Turn domain and storage errors into JSON failures."""

        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except DomainError as e:
                return _failure(e.code, str(e), _status_code(e))
            except StorageError as e:
                logger.warning("storage unavailable in %s: %s", request.path, e)
                return _failure("storage_unavailable", "Database is temporarily unavailable, please retry", 503)
            except Exception:
                logger.exception("unexpected error in %s", request.path)
                return _failure("internal_error", "System error while processing attendance", 500)

        return wrapper

    def _body() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    def _optional_datetime(data: dict, key: str):
        value = data.get(key)
        if value in (None, ""):
            return None
        try:
            return parse_iso_datetime(str(value))
        except ValueError:
            raise ValidationError(f"{key} must be an ISO-8601 local datetime without UTC offset")

    def _optional_status(data: dict):
        value = data.get("status")
        if value in (None, ""):
            return None
        try:
            return AttendanceStatus(str(value).upper())
        except ValueError:
            raise ValidationError("status must be OVERTIME, UNDERTIME or EXACT_TIME")

    @app.route("/api/attendance/check-in", methods=["POST"], endpoint="attendance_check_in")
    @json_api
    def check_in():
        record = service.check_in(_body().get("employee_id"))
        return jsonify({"success": True, "attendance": record.to_dict()}), 201

    @app.route("/api/attendance/check-out", methods=["POST"], endpoint="attendance_check_out")
    @json_api
    def check_out():
        record = service.check_out(_body().get("employee_id"))
        return jsonify({"success": True, "attendance": record.to_dict()})

    @app.route("/api/attendance/record", methods=["POST"], endpoint="attendance_record")
    @json_api
    def record_event():
        data = _body()
        try:
            event_type = EventType.parse(str(data.get("type", "")))
        except ValueError:
            raise ValidationError("type must be TIME_IN or TIME_OUT")

        record = service.record(data.get("employee_id"), event_type)
        status = "TIMED_IN" if event_type == EventType.CHECK_IN else "TIMED_OUT"
        return jsonify({"success": True, "status": status, "attendance": record.to_dict()})

    @app.route("/api/attendance/scan", methods=["POST"], endpoint="attendance_scan")
    @json_api
    def scan():
        result = service.scan(str(_body().get("qr_data") or ""))
        return jsonify(
            {
                "success": True,
                "action": result.event_type.value,
                "attendance": result.record.to_dict(),
            }
        )

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    @json_api
    def list_records():
        employee_id = request.args.get("employee_id") or None
        date_s = request.args.get("date") or None
        try:
            work_date = parse_iso_date(date_s) if date_s else None
        except ValueError:
            raise ValidationError("date must be YYYY-MM-DD")

        rows = service.list_records(
            employee_id=employee_id,
            work_date=work_date,
            search=request.args.get("search"),
        )
        return jsonify({"success": True, "records": [r.to_dict() for r in rows]})

    @app.route("/api/attendance/today/<int:employee_id>", methods=["GET"], endpoint="attendance_today")
    @json_api
    def today(employee_id: int):
        record = service.get_today_record(employee_id)
        return jsonify({"success": True, "attendance": record.to_dict() if record else None})

    @app.route("/api/attendance/history/<int:employee_id>", methods=["GET"], endpoint="attendance_history")
    @json_api
    def history(employee_id: int):
        limit = request.args.get("limit") or DEFAULT_HISTORY_LIMIT
        rows = service.get_history(employee_id, limit=limit)
        return jsonify({"success": True, "records": [r.to_dict() for r in rows]})

    @app.route("/api/attendance/stats/<int:employee_id>", methods=["GET"], endpoint="attendance_stats")
    @json_api
    def stats(employee_id: int):
        return jsonify({"success": True, "stats": service.get_stats(employee_id).to_dict()})

    @app.route("/api/attendance/records", methods=["POST"], endpoint="attendance_create_record")
    @json_api
    def create_record():
        data = _body()
        date_s = data.get("date")
        try:
            work_date = parse_iso_date(str(date_s)) if date_s else None
        except ValueError:
            raise ValidationError("date must be YYYY-MM-DD")

        record = service.create_record(
            employee_id=data.get("employee_id"),
            time_in=_optional_datetime(data, "time_in"),
            time_out=_optional_datetime(data, "time_out"),
            status=_optional_status(data),
            work_date=work_date,
        )
        return jsonify({"success": True, "attendance": record.to_dict()}), 201

    @app.route("/api/attendance/records/<int:attendance_id>", methods=["PUT"], endpoint="attendance_update_record")
    @json_api
    def update_record(attendance_id: int):
        data = _body()
        record = service.update_record(
            attendance_id,
            time_in=_optional_datetime(data, "time_in"),
            time_out=_optional_datetime(data, "time_out"),
            status=_optional_status(data),
        )
        return jsonify({"success": True, "attendance": record.to_dict()})

    @app.route("/api/attendance/records/<int:attendance_id>", methods=["DELETE"], endpoint="attendance_delete_record")
    @json_api
    def delete_record(attendance_id: int):
        service.delete_record(attendance_id)
        return jsonify({"success": True})

    @app.route("/api/attendance/records/delete-many", methods=["POST"], endpoint="attendance_delete_records")
    @json_api
    def delete_records():
        ids = _body().get("ids")
        if not isinstance(ids, list):
            raise ValidationError("ids must be a list of record ids")
        count = service.delete_records(ids)
        return jsonify({"success": True, "count": count})
