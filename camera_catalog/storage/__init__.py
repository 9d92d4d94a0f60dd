from flask import current_app

from camera_catalog.storage.base import (
    CameraNotFoundError,
    CameraStorage,
    StorageError,
    StorageUnavailableError,
)
from camera_catalog.storage.memory_backend import MemoryCameraStorage
from camera_catalog.storage.sqlalchemy_backend import SQLAlchemyCameraStorage

BACKENDS = {
    SQLAlchemyCameraStorage.name: SQLAlchemyCameraStorage,
    MemoryCameraStorage.name: MemoryCameraStorage,
}

EXTENSION_KEY = 'camera_storage'


def init_storage(app):
    """Instantiate the backend named by DATA_BACKEND and attach it to ``app``."""
    backend = app.config["DATA_BACKEND"]
    try:
        storage_class = BACKENDS[backend]
    except KeyError:
        raise ValueError(
            f"Unknown DATA_BACKEND '{backend}', expected one of: {', '.join(sorted(BACKENDS))}")
    storage = storage_class(app)
    app.extensions[EXTENSION_KEY] = storage
    return storage


def get_storage() -> CameraStorage:
    return current_app.extensions[EXTENSION_KEY]


__all__ = [
    'BACKENDS',
    'CameraNotFoundError',
    'CameraStorage',
    'StorageError',
    'StorageUnavailableError',
    'get_storage',
    'init_storage',
]
