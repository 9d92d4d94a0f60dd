import threading
from itertools import count

from camera_catalog.storage.base import (
    CameraNotFoundError,
    CameraStorage,
    next_page_token,
    parse_page_token,
)


class MemoryCameraStorage(CameraStorage):
    """Process-local storage, records are lost when the process exits."""

    name = 'memory'

    def __init__(self, app=None):
        super().__init__(app)
        self._lock = threading.Lock()
        self._ids = count(1)
        self._records = {}

    def _page(self, records, limit, page_token):
        offset = parse_page_token(page_token)
        page = [dict(r) for r in records[offset:offset + limit]]
        return page, next_page_token(offset, len(page), limit, len(records))

    def list(self, limit, page_token=None):
        with self._lock:
            records = list(self._records.values())
        return self._page(records, limit, page_token)

    def list_by(self, owner_id, limit, page_token=None):
        with self._lock:
            records = [r for r in self._records.values()
                       if r.get('createdById') == owner_id]
        return self._page(records, limit, page_token)

    def create(self, data):
        with self._lock:
            camera_id = str(next(self._ids))
            record = {k: v for k, v in data.items() if k != 'id'}
            record['id'] = camera_id
            self._records[camera_id] = record
            return dict(record)

    def read(self, camera_id):
        with self._lock:
            record = self._records.get(str(camera_id))
            if record is None:
                raise CameraNotFoundError(camera_id)
            return dict(record)

    def update(self, camera_id, data):
        with self._lock:
            record = self._records.get(str(camera_id))
            if record is None:
                raise CameraNotFoundError(camera_id)
            record.update({k: v for k, v in data.items() if k != 'id'})
            return dict(record)

    def delete(self, camera_id):
        with self._lock:
            if self._records.pop(str(camera_id), None) is None:
                raise CameraNotFoundError(camera_id)
