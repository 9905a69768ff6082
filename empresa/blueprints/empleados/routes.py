"""
Routes for the empleados blueprint.

Employee bodies carry their department as ``{"id": ...}``; responses
embed the department's id and name.
"""

from flask import jsonify, request

from empresa.blueprints import json_list
from empresa.blueprints.empleados import bp
from empresa.mappers import empleado_mapper
from empresa.services import empleado_service


@bp.route("", methods=["GET"])
def get_all_empleados():
    empleados = empleado_service.get_all()
    if not empleados:
        return "", 404
    return json_list(empleado_mapper.to_transfer_list(empleados)), 200


@bp.route("/<bigint:empleado_id>", methods=["GET"])
def find_by_id(empleado_id):
    empleado = empleado_service.find_by_id(empleado_id)
    if empleado is None:
        return "", 404
    return jsonify(empleado_mapper.to_transfer(empleado).to_dict()), 200


@bp.route("", methods=["POST"])
def create_empleado():
    """
    Create an employee.

    A department id that does not exist is answered with 422 by the
    application-level error handler.
    """
    empleado_to = empleado_mapper.from_payload(request.get_json(silent=True))
    empleado = empleado_service.create_empleado(empleado_to)
    return jsonify(empleado_mapper.to_transfer(empleado).to_dict()), 201


@bp.route("/<bigint:empleado_id>", methods=["PUT"])
def update_empleado(empleado_id):
    empleado_to = empleado_mapper.from_payload(request.get_json(silent=True))
    empleado = empleado_service.update_empleado(empleado_id, empleado_to)
    return jsonify(empleado_mapper.to_transfer(empleado).to_dict()), 200


@bp.route("/<bigint:empleado_id>", methods=["DELETE"])
def delete_empleado_by_id(empleado_id):
    empleado_service.delete_empleado_by_id(empleado_id)
    return "", 200


@bp.route("/nombre/<nombre>", methods=["GET"])
def find_by_nombre(nombre):
    empleados = empleado_service.find_by_nombre(nombre)
    if not empleados:
        return "", 404
    return json_list(empleado_mapper.to_transfer_list(empleados)), 200


@bp.route("/edad/<bigint:edad>", methods=["GET"])
def find_by_edad(edad):
    empleados = empleado_service.find_by_edad(edad)
    if not empleados:
        return "", 404
    return json_list(empleado_mapper.to_transfer_list(empleados)), 200


@bp.route("/salariosup/<bigint:salario>", methods=["GET"])
def find_by_superior_a_salario(salario):
    empleados = empleado_service.find_by_superior_a_salario(salario)
    if not empleados:
        return "", 404
    return json_list(empleado_mapper.to_transfer_list(empleados)), 200


@bp.route("/salariosinf/<bigint:salario>", methods=["GET"])
def find_by_inferior_a_salario(salario):
    empleados = empleado_service.find_by_inferior_a_salario(salario)
    if not empleados:
        return "", 404
    return json_list(empleado_mapper.to_transfer_list(empleados)), 200


@bp.route("/salariosbet/<bigint:salario_min>/<bigint:salario_max>", methods=["GET"])
def find_by_entre_salarios(salario_min, salario_max):
    empleados = empleado_service.find_by_entre_salarios(salario_min, salario_max)
    if not empleados:
        return "", 404
    return json_list(empleado_mapper.to_transfer_list(empleados)), 200
