from camera_catalog.models.cameras_model import Camera

__all__ = [
    'Camera'
]
