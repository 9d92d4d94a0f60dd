import logging
from datetime import datetime, timezone

from flask import current_app
from google.api_core.exceptions import GoogleAPIError
from google.cloud import storage
from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)

_gcs_client = None


class ImageUploadError(Exception):
    error = 'upload_failed'


class InvalidImageError(ImageUploadError):
    error = 'invalid_image'


def get_gcs_client():
    global _gcs_client
    if _gcs_client is None:
        _gcs_client = storage.Client()  # default application credentials
    return _gcs_client


def allowed_image(filename, allowed_extensions):
    return '.' in filename and \
        filename.rsplit('.', 1)[1].lower() in allowed_extensions


def safe_blob_name(filename):
    """
    Prefix the secured filename with a timestamp so uploads never collide.
    """
    filename = secure_filename(filename)
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d-%H%M%S%f")
    return f"{timestamp}-{filename}"


def upload_image(image_file):
    """
    Uploads an image to GCS and returns its public URL, or None when no file was sent.
    """
    if image_file is None or not image_file.filename:
        return None

    allowed_extensions = current_app.config['ALLOWED_IMAGE_EXTENSIONS']
    if not allowed_image(image_file.filename, allowed_extensions):
        raise InvalidImageError(
            f"Invalid file type. Allowed types: {', '.join(sorted(allowed_extensions))}")

    bucket_name = current_app.config.get('GCS_BUCKET_NAME')
    if not bucket_name:
        raise ImageUploadError('GCS_BUCKET_NAME environment variable not set')

    blob_name = safe_blob_name(image_file.filename)
    try:
        client = get_gcs_client()
        bucket = client.bucket(bucket_name)
        blob = bucket.blob(blob_name)
        blob.upload_from_file(image_file.stream, content_type=image_file.mimetype)
        blob.make_public()
    except GoogleAPIError as e:
        logger.error("Upload of %s to bucket %s failed: %s", blob_name, bucket_name, e)
        raise ImageUploadError(f'Image upload failed: {e}') from e

    logger.info("Uploaded image %s to bucket %s", blob_name, bucket_name)
    return f"https://storage.googleapis.com/{bucket_name}/{blob_name}"
