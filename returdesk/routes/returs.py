# -*- coding: utf-8 -*-
from flask import Blueprint, request, jsonify, current_app
import logging

from .. import socketio, LIFECYCLE_EXTENSION
from ..core.errors import ReturnError, InvalidArgument
from ..core.lifecycle import parse_id

logger = logging.getLogger(__name__)

returs_bp = Blueprint('returs', __name__)


def get_lifecycle():
    return current_app.extensions[LIFECYCLE_EXTENSION]


def get_json_object():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidArgument("Invalid input")
    return data


@returs_bp.errorhandler(ReturnError)
def handle_return_error(error):
    logger.debug(f"{request.method} {request.path} failed with {error.status_code}: {error.message}")
    return jsonify(error.to_dict()), error.status_code


# ===================== LIST ===================== #
@returs_bp.route('/retur', methods=['GET'])
def get_returs():
    returs = get_lifecycle().list_all()
    return jsonify([r.to_dict() for r in returs]), 200


# ===================== CREATE ===================== #
@returs_bp.route('/retur', methods=['POST'])
def create_retur():
    data = get_json_object()
    # status/resolution in the payload are ignored, new returns are always Pending
    retur = get_lifecycle().create(data.get('item'), data.get('reason'))

    payload = retur.to_dict()
    socketio.emit('retur_created', payload)
    return jsonify(payload), 201


# ===================== APPROVE / DISAPPROVE ===================== #
@returs_bp.route('/retur/<id>/approve', methods=['POST'])
def approve_retur(id):
    retur_id = parse_id(id)
    data = get_json_object()
    retur = get_lifecycle().approve(retur_id, data.get('resolution'))

    payload = retur.to_dict()
    socketio.emit('retur_updated', payload)
    return jsonify(payload), 200


@returs_bp.route('/retur/<id>/disapprove', methods=['POST'])
def disapprove_retur(id):
    retur = get_lifecycle().disapprove(id)

    payload = retur.to_dict()
    socketio.emit('retur_updated', payload)
    return jsonify(payload), 200


# ===================== DELETE / UNDO ===================== #
@returs_bp.route('/retur/<id>/delete', methods=['DELETE'])
def delete_retur(id):
    retur_id = get_lifecycle().delete(id)

    socketio.emit('retur_deleted', {"id": retur_id})
    return jsonify({
        "message": f"Return with ID {retur_id} deleted",
        "id": retur_id
    }), 200


@returs_bp.route('/retur/undo', methods=['POST'])
def undo_delete_retur():
    retur = get_lifecycle().undo_delete()

    payload = retur.to_dict()
    socketio.emit('retur_restored', payload)
    return jsonify(payload), 200


@returs_bp.route('/retur/undo', methods=['GET'])
def get_undo_status():
    lifecycle = get_lifecycle()
    return jsonify({
        "can_undo": lifecycle.can_undo(),
        "depth": lifecycle.undo_depth(),
        "next_id": lifecycle.next_id()
    }), 200

