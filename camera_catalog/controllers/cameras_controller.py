from flask import Blueprint, current_app, redirect, render_template, request, url_for

from camera_catalog.controllers.error_handlers import render_failure
from camera_catalog.middlewares.auth_middleware import identity_optional, identity_required
from camera_catalog.services.camera_service import CameraService, clean_form

cameras_bp = Blueprint('cameras', __name__)

PAGE_SIZE = 10


@cameras_bp.after_request
def set_content_type(response):
    # Every response from these routes is HTML, redirects included
    response.headers['Content-Type'] = 'text/html; charset=utf-8'
    return response


def _detail_url(camera):
    return url_for('cameras.view_camera', camera_id=camera['id'])


@cameras_bp.route('/', methods=['GET'], strict_slashes=False)
def list_cameras():
    """Display a page of cameras (up to ten at a time)."""
    result = CameraService.list_cameras(PAGE_SIZE, request.args.get('pageToken'))
    if not result['success']:
        return render_failure(result)
    return render_template('cameras/list.html',
                           cameras=result['cameras'],
                           next_page_token=result['nextPageToken'])


@cameras_bp.route('/mine', methods=['GET'])
@identity_required
def list_my_cameras(identity):
    result = CameraService.list_cameras_by(identity.id, PAGE_SIZE, request.args.get('pageToken'))
    if not result['success']:
        return render_failure(result)
    return render_template('cameras/list.html',
                           cameras=result['cameras'],
                           next_page_token=result['nextPageToken'])


@cameras_bp.route('/add', methods=['GET'])
def add_camera_form():
    return render_template('cameras/form.html', camera={}, action='Add')


@cameras_bp.route('/add', methods=['POST'])
@identity_optional
def add_camera(identity):
    result = CameraService.create_camera(clean_form(request.form),
                                         identity=identity,
                                         image=request.files.get('image'))
    if not result['success']:
        return render_failure(result)
    return redirect(_detail_url(result['camera']))


@cameras_bp.route('/<camera_id>/edit', methods=['GET'])
def edit_camera_form(camera_id):
    result = CameraService.get_camera(camera_id)
    if not result['success']:
        return render_failure(result)
    return render_template('cameras/form.html', camera=result['camera'], action='Edit')


@cameras_bp.route('/<camera_id>/edit', methods=['POST'])
@identity_optional
def edit_camera(camera_id, identity):
    if identity is not None:
        current_app.logger.info("Camera %s edited by %s", camera_id, identity.id)
    result = CameraService.update_camera(camera_id,
                                         clean_form(request.form),
                                         image=request.files.get('image'))
    if not result['success']:
        return render_failure(result)
    return redirect(_detail_url(result['camera']))


@cameras_bp.route('/<camera_id>', methods=['GET'])
def view_camera(camera_id):
    result = CameraService.get_camera(camera_id)
    if not result['success']:
        return render_failure(result)
    return render_template('cameras/view.html', camera=result['camera'])


@cameras_bp.route('/<camera_id>/delete', methods=['GET'])
def delete_camera(camera_id):
    result = CameraService.delete_camera(camera_id)
    if not result['success']:
        return render_failure(result)
    return redirect(url_for('cameras.list_cameras'))
