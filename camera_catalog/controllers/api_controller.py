from flask import Blueprint, jsonify, request

from camera_catalog.controllers.error_handlers import json_failure
from camera_catalog.services.camera_service import CameraService

api_bp = Blueprint('api', __name__)

PAGE_SIZE = 10


@api_bp.route('/', methods=['GET'], strict_slashes=False)
def get_cameras():
    result = CameraService.list_cameras(PAGE_SIZE, request.args.get('pageToken'))
    if not result['success']:
        return json_failure(result)
    return jsonify({
        'success': True,
        'data': result['cameras'],
        'nextPageToken': result['nextPageToken']
    }), 200


@api_bp.route('/', methods=['POST'], strict_slashes=False)
def create_camera():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({
            'success': False,
            'message': 'A JSON object is required'
        }), 400

    result = CameraService.create_camera(data)
    if not result['success']:
        return json_failure(result)
    return jsonify({'success': True, 'data': result['camera']}), 201


@api_bp.route('/<camera_id>', methods=['GET'], strict_slashes=False)
def get_camera(camera_id):
    result = CameraService.get_camera(camera_id)
    if not result['success']:
        return json_failure(result)
    return jsonify({'success': True, 'data': result['camera']}), 200


@api_bp.route('/<camera_id>', methods=['PUT'], strict_slashes=False)
def update_camera(camera_id):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({
            'success': False,
            'message': 'A JSON object is required'
        }), 400

    result = CameraService.update_camera(camera_id, data)
    if not result['success']:
        return json_failure(result)
    return jsonify({'success': True, 'data': result['camera']}), 200


@api_bp.route('/<camera_id>', methods=['DELETE'], strict_slashes=False)
def delete_camera(camera_id):
    result = CameraService.delete_camera(camera_id)
    if not result['success']:
        return json_failure(result)
    return jsonify(result), 200
