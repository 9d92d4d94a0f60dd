import logging

from flask import current_app

from camera_catalog.storage import StorageError, get_storage
from camera_catalog.utils import ImageUploadError, upload_image

logger = logging.getLogger(__name__)

ANONYMOUS = 'Anonymous'

# Form bookkeeping that never reaches storage
FORM_ONLY_FIELDS = ('csrf_token', 'image', 'id')


def _failure(e):
    return {
        'success': False,
        'error': e.error,
        'message': str(e)
    }


def clean_form(form):
    return {k: v for k, v in form.items() if k not in FORM_ONLY_FIELDS}


class CameraService:
    @staticmethod
    def list_cameras(limit, page_token=None):
        try:
            cameras, next_page_token = get_storage().list(limit, page_token)
        except StorageError as e:
            return _failure(e)
        return {
            'success': True,
            'cameras': cameras,
            'nextPageToken': next_page_token
        }

    @staticmethod
    def list_cameras_by(owner_id, limit, page_token=None):
        try:
            cameras, next_page_token = get_storage().list_by(owner_id, limit, page_token)
        except StorageError as e:
            return _failure(e)
        return {
            'success': True,
            'cameras': cameras,
            'nextPageToken': next_page_token
        }

    @staticmethod
    def get_camera(camera_id):
        try:
            camera = get_storage().read(camera_id)
        except StorageError as e:
            return _failure(e)
        return {
            'success': True,
            'camera': camera
        }

    @staticmethod
    def create_camera(data, identity=None, image=None):
        data = dict(data)

        # The logged in user, if any, is recorded as the creator
        if identity is not None:
            data['createdBy'] = identity.display_name
            data['createdById'] = identity.id
        else:
            data['createdBy'] = ANONYMOUS
            data.pop('createdById', None)

        try:
            image_url = CameraService._upload(image)
            if image_url:
                data['imageUrl'] = image_url
            camera = get_storage().create(data)
        except (ImageUploadError, StorageError) as e:
            return _failure(e)

        logger.info("Camera %s created by %s", camera['id'], camera['createdBy'])
        return {
            'success': True,
            'camera': camera,
            'message': 'Camera created successfully'
        }

    @staticmethod
    def update_camera(camera_id, data, image=None):
        data = dict(data)
        try:
            image_url = CameraService._upload(image)
            if image_url:
                data['imageUrl'] = image_url
            camera = get_storage().update(camera_id, data)
        except (ImageUploadError, StorageError) as e:
            return _failure(e)
        return {
            'success': True,
            'camera': camera,
            'message': 'Camera updated successfully'
        }

    @staticmethod
    def delete_camera(camera_id):
        try:
            get_storage().delete(camera_id)
        except StorageError as e:
            return _failure(e)
        logger.info("Camera %s deleted", camera_id)
        return {
            'success': True,
            'message': 'Camera deleted successfully'
        }

    @staticmethod
    def _upload(image):
        if image is None or not current_app.config['IMAGE_UPLOAD_ENABLED']:
            return None
        return upload_image(image)
