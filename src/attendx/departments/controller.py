from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify

from ..common.http import api_errors, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.department_service

    @app.route("/api/departments", methods=["GET"], endpoint="list_departments")
    @api_errors("fetching departments")
    def list_departments():
        return jsonify([asdict(d) for d in service.list_departments()])

    @app.route("/api/departments", methods=["POST"], endpoint="create_department")
    @api_errors("creating department")
    def create_department():
        department = service.create_department(json_body())
        return jsonify(asdict(department)), 201

    @app.route("/api/departments/<department_id>", methods=["DELETE"], endpoint="delete_department")
    @api_errors("deleting department")
    def delete_department(department_id: str):
        service.delete_department(department_id)
        return jsonify({"success": True})
