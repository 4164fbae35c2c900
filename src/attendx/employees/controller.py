from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify

from ..common.http import api_errors, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @api_errors("fetching employees")
    def list_employees():
        return jsonify([asdict(e) for e in service.list_employees()])

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @api_errors("creating employee")
    def create_employee():
        employee = service.create_employee(json_body())
        return jsonify(asdict(employee)), 201

    @app.route("/api/employees/<employee_id>", methods=["PATCH"], endpoint="update_employee")
    @api_errors("updating employee")
    def update_employee(employee_id: str):
        employee = service.update_employee(employee_id, json_body())
        return jsonify(asdict(employee))

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @api_errors("deleting employee")
    def delete_employee(employee_id: str):
        service.delete_employee(employee_id)
        return jsonify({"success": True})
