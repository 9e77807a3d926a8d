from __future__ import annotations

from flask import Flask, abort, jsonify, request

from ..container import Container
from .model import Employee, Found

API_PREFIX = "/api/employees"


def _read_employee() -> Employee:
    payload = request.get_json()
    if not isinstance(payload, dict):
        abort(400)
    try:
        return Employee.from_json(payload)
    except (TypeError, ValueError):
        abort(400)


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route(API_PREFIX, methods=["GET"], endpoint="list_employees")
    def list_employees():
        return jsonify([e.to_json() for e in service.find_all()]), 200

    @app.route(f"{API_PREFIX}/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: int):
        lookup = service.find_by_id(employee_id)
        if not isinstance(lookup, Found):
            return "", 404
        return jsonify(lookup.employee.to_json()), 200

    @app.route(API_PREFIX, methods=["POST"], endpoint="create_employee")
    def create_employee():
        # Client-supplied ids are dropped: POST always inserts.
        employee = _read_employee().with_id(None)
        saved = service.save(employee)
        response = jsonify(saved.to_json())
        response.status_code = 201
        response.headers["Location"] = f"{API_PREFIX}/{saved.employee_id}"
        return response

    @app.route(f"{API_PREFIX}/<int:employee_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(employee_id: int):
        incoming = _read_employee()
        lookup = service.find_by_id(employee_id)
        if not isinstance(lookup, Found):
            return "", 404
        updated = service.save(lookup.employee.with_fields(incoming))
        return jsonify(updated.to_json()), 200

    @app.route(f"{API_PREFIX}/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: int):
        service.delete(employee_id)
        return "", 204
