"""
Routes for the jefes blueprint.

Lookups answer 404 with an empty body when nothing matches.  Create and
update always answer with the resulting boss; delete always answers 200.
"""

from flask import jsonify, request

from empresa.blueprints import json_list
from empresa.blueprints.jefes import bp
from empresa.mappers import jefe_mapper
from empresa.services import jefe_service


# -- Common lookups --------------------------------------------------------


@bp.route("", methods=["GET"])
def get_all_jefes():
    """List every boss."""
    jefes = jefe_service.get_all()
    if not jefes:
        return "", 404
    return json_list(jefe_mapper.to_transfer_list(jefes)), 200


@bp.route("/<bigint:jefe_id>", methods=["GET"])
def find_by_id(jefe_id):
    jefe = jefe_service.find_by_id(jefe_id)
    if jefe is None:
        return "", 404
    return jsonify(jefe_mapper.to_transfer(jefe).to_dict()), 200


# -- Mutations -------------------------------------------------------------


@bp.route("", methods=["POST"])
def create_jefe():
    """Create a boss from the JSON body and answer 201."""
    jefe_to = jefe_mapper.from_payload(request.get_json(silent=True))
    jefe = jefe_service.create_jefe(jefe_to)
    return jsonify(jefe_mapper.to_transfer(jefe).to_dict()), 201


@bp.route("/<bigint:jefe_id>", methods=["PUT"])
def update_jefe(jefe_id):
    """Replace every field of an existing boss."""
    jefe_to = jefe_mapper.from_payload(request.get_json(silent=True))
    jefe = jefe_service.update_jefe(jefe_id, jefe_to)
    return jsonify(jefe_mapper.to_transfer(jefe).to_dict()), 200


@bp.route("/<bigint:jefe_id>", methods=["DELETE"])
def delete_jefe_by_id(jefe_id):
    jefe_service.delete_jefe_by_id(jefe_id)
    return "", 200


# -- Filters ---------------------------------------------------------------


@bp.route("/nombre/<nombre>", methods=["GET"])
def find_by_nombre(nombre):
    jefes = jefe_service.find_by_nombre(nombre)
    if not jefes:
        return "", 404
    return json_list(jefe_mapper.to_transfer_list(jefes)), 200


@bp.route("/edad/<bigint:edad>", methods=["GET"])
def find_by_edad(edad):
    jefes = jefe_service.find_by_edad(edad)
    if not jefes:
        return "", 404
    return json_list(jefe_mapper.to_transfer_list(jefes)), 200


@bp.route("/salariosup/<bigint:salario>", methods=["GET"])
def find_by_superior_a_salario(salario):
    """Bosses earning strictly more than ``salario``."""
    jefes = jefe_service.find_by_superior_a_salario(salario)
    if not jefes:
        return "", 404
    return json_list(jefe_mapper.to_transfer_list(jefes)), 200


@bp.route("/salariosinf/<bigint:salario>", methods=["GET"])
def find_by_inferior_a_salario(salario):
    """Bosses earning strictly less than ``salario``."""
    jefes = jefe_service.find_by_inferior_a_salario(salario)
    if not jefes:
        return "", 404
    return json_list(jefe_mapper.to_transfer_list(jefes)), 200


@bp.route("/salariosbet/<bigint:salario_min>/<bigint:salario_max>", methods=["GET"])
def find_by_entre_salarios(salario_min, salario_max):
    """Bosses earning between the two bounds, both inclusive."""
    jefes = jefe_service.find_by_entre_salarios(salario_min, salario_max)
    if not jefes:
        return "", 404
    return json_list(jefe_mapper.to_transfer_list(jefes)), 200
