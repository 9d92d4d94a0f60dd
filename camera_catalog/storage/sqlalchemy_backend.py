import logging
from contextlib import contextmanager

from sqlalchemy.exc import OperationalError, SQLAlchemyError

from camera_catalog import db
from camera_catalog.models.cameras_model import Camera
from camera_catalog.storage.base import (
    CameraNotFoundError,
    CameraStorage,
    StorageError,
    StorageUnavailableError,
    next_page_token,
    parse_page_token,
)

logger = logging.getLogger(__name__)

# Signed 64-bit range, the widest INTEGER key the databases accept
MIN_ID = -2 ** 63
MAX_ID = 2 ** 63 - 1


class SQLAlchemyCameraStorage(CameraStorage):
    """Cameras kept in a SQL database through Flask-SQLAlchemy."""

    name = 'cloudsql'

    def init_schema(self):
        with self.app.app_context():
            db.create_all()

    @contextmanager
    def _session(self):
        try:
            yield db.session
        except OperationalError as e:
            db.session.rollback()
            logger.error("Database unavailable: %s", e)
            raise StorageUnavailableError('Database unavailable') from e
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error("Database error: %s", e)
            # statement and parameters stay in the log, never in the message
            raise StorageError('Database error') from e

    def _get(self, session, camera_id):
        try:
            key = int(camera_id)
        except (TypeError, ValueError):
            raise CameraNotFoundError(camera_id)
        if not MIN_ID <= key <= MAX_ID:
            raise CameraNotFoundError(camera_id)
        camera = session.get(Camera, key)
        if camera is None:
            raise CameraNotFoundError(camera_id)
        return camera

    def _page(self, query, limit, page_token):
        offset = parse_page_token(page_token)
        with self._session():
            total = query.count()
            cameras = query.order_by(Camera.id).offset(offset).limit(limit).all()
            page = [c.to_dict() for c in cameras]
        return page, next_page_token(offset, len(page), limit, total)

    def list(self, limit, page_token=None):
        return self._page(Camera.query, limit, page_token)

    def list_by(self, owner_id, limit, page_token=None):
        return self._page(Camera.query.filter(Camera.createdById == owner_id), limit, page_token)

    def create(self, data):
        with self._session() as session:
            camera = Camera()
            camera.apply(data)
            session.add(camera)
            session.commit()
            return camera.to_dict()

    def read(self, camera_id):
        with self._session() as session:
            return self._get(session, camera_id).to_dict()

    def update(self, camera_id, data):
        with self._session() as session:
            camera = self._get(session, camera_id)
            camera.apply(data)
            session.commit()
            return camera.to_dict()

    def delete(self, camera_id):
        with self._session() as session:
            camera = self._get(session, camera_id)
            session.delete(camera)
            session.commit()
