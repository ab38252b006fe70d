from __future__ import annotations

import io

from flask import Flask, jsonify, send_file

from ..container import Container
from .service import build_payload, render_png


def register(app: Flask, container: Container) -> None:
    def _missing(employee_id: int):
        return jsonify({"success": False, "error": "employee_not_found", "message": f"Employee {employee_id} not found"}), 404

    @app.route("/api/employees/<int:employee_id>/qr", methods=["GET"], endpoint="employee_qr_payload")
    def qr_payload(employee_id: int):
        employee = container.employees_repo.get_by_id(employee_id)
        if not employee:
            return _missing(employee_id)
        return jsonify(
            {
                "success": True,
                "employee_id": employee.employee_id,
                "full_name": employee.full_name,
                "payload": build_payload(employee.employee_id),
            }
        )

    @app.route("/api/employees/<int:employee_id>/qr.png", methods=["GET"], endpoint="employee_qr_png")
    def qr_png(employee_id: int):
        """Badge image; the scanner reads the same text as /qr returns."""
        employee = container.employees_repo.get_by_id(employee_id)
        if not employee:
            return _missing(employee_id)
        return send_file(io.BytesIO(render_png(employee.employee_id)), mimetype="image/png")
