"""
Routes for the departamentos blueprint.
"""

from flask import jsonify, request

from empresa.blueprints import json_list
from empresa.blueprints.departamentos import bp
from empresa.mappers import departamento_mapper
from empresa.services import departamento_service


@bp.route("", methods=["GET"])
def get_all_departamentos():
    departamentos = departamento_service.get_all()
    if not departamentos:
        return "", 404
    return json_list(departamento_mapper.to_transfer_list(departamentos)), 200


@bp.route("/<bigint:departamento_id>", methods=["GET"])
def find_by_id(departamento_id):
    departamento = departamento_service.find_by_id(departamento_id)
    if departamento is None:
        return "", 404
    return jsonify(departamento_mapper.to_transfer(departamento).to_dict()), 200


@bp.route("/nombre/<nombre>", methods=["GET"])
def find_by_nombre(nombre):
    departamentos = departamento_service.find_by_nombre(nombre)
    if not departamentos:
        return "", 404
    return json_list(departamento_mapper.to_transfer_list(departamentos)), 200


@bp.route("", methods=["POST"])
def create_departamento():
    departamento_to = departamento_mapper.from_payload(request.get_json(silent=True))
    departamento = departamento_service.create_departamento(departamento_to)
    return jsonify(departamento_mapper.to_transfer(departamento).to_dict()), 201


@bp.route("/<bigint:departamento_id>", methods=["PUT"])
def update_departamento(departamento_id):
    departamento_to = departamento_mapper.from_payload(request.get_json(silent=True))
    departamento = departamento_service.update_departamento(
        departamento_id, departamento_to
    )
    return jsonify(departamento_mapper.to_transfer(departamento).to_dict()), 200


@bp.route("/<bigint:departamento_id>", methods=["DELETE"])
def delete_departamento_by_id(departamento_id):
    """
    Delete a department.

    Answers 409 (via the application error handler) while employees
    still belong to it.
    """
    departamento_service.delete_departamento_by_id(departamento_id)
    return "", 200
