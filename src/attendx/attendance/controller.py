from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_errors, json_body
from ..container import Container
from .model import AttendanceRecord


def to_json(record: AttendanceRecord) -> dict:
    # employee_id is exposed as employeeId; the other entities keep column names.
    return {
        "id": record.id,
        "employeeId": record.employee_id,
        "date": record.date,
        "status": record.status,
        "outlet": record.outlet,
    }


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    @api_errors("fetching attendance records")
    def list_attendance():
        return jsonify([to_json(r) for r in service.list_attendance()])

    @app.route("/api/attendance", methods=["POST"], endpoint="record_attendance")
    @api_errors("updating attendance")
    def record_attendance():
        record, created = service.record_from_payload(json_body())
        return jsonify(to_json(record)), (201 if created else 200)

    @app.route("/api/attendance/<employee_id>/<work_date>", methods=["DELETE"], endpoint="delete_attendance")
    @api_errors("deleting attendance record")
    def delete_attendance(employee_id: str, work_date: str):
        service.delete_record(employee_id, work_date)
        return jsonify({"success": True})
