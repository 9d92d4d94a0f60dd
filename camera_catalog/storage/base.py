"""
Camera Storage Interface
========================

Contract every camera persistence backend satisfies. Records cross this
boundary as plain dicts whose ``id`` is a string assigned by the backend.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

Record = Dict[str, Any]
Page = Tuple[List[Record], Optional[str]]


class StorageError(Exception):
    """Base class for failures raised by a storage backend."""

    error = 'storage_error'


class CameraNotFoundError(StorageError):
    """Raised when an operation targets an id the backend does not hold."""

    error = 'not_found'

    def __init__(self, camera_id):
        super().__init__(f'Camera {camera_id} not found')
        self.camera_id = camera_id


class StorageUnavailableError(StorageError):
    """Raised when the persistence layer cannot be reached."""

    error = 'unavailable'


def parse_page_token(page_token) -> int:
    """Decode an offset cursor. Missing or malformed tokens start from the top."""
    if not page_token:
        return 0
    try:
        offset = int(page_token)
    except (TypeError, ValueError):
        return 0
    return max(offset, 0)


def next_page_token(offset: int, returned: int, limit: int, total: int) -> Optional[str]:
    end = offset + returned
    if returned < limit or end >= total:
        return None
    return str(end)


class CameraStorage(ABC):
    """
    Abstract storage for camera records.

    One concrete implementation is active per application, chosen from
    the ``DATA_BACKEND`` setting when the app is created.
    """

    name = None

    def __init__(self, app=None):
        self.app = app

    def init_schema(self):
        """Create whatever the backend needs before first use."""

    @abstractmethod
    def list(self, limit: int, page_token: Optional[str] = None) -> Page:
        """
        Return at most ``limit`` records in a stable order.

        Args:
            limit: Page size
            page_token: Cursor returned by a previous call, or None

        Returns:
            (records, next_page_token); the token is None on the last page
        """

    @abstractmethod
    def list_by(self, owner_id: str, limit: int, page_token: Optional[str] = None) -> Page:
        """Same as ``list`` restricted to records whose createdById is ``owner_id``."""

    @abstractmethod
    def create(self, data: Record) -> Record:
        """Persist ``data`` under a fresh id and return the stored record."""

    @abstractmethod
    def read(self, camera_id: str) -> Record:
        """Return the record or raise CameraNotFoundError."""

    @abstractmethod
    def update(self, camera_id: str, data: Record) -> Record:
        """Merge ``data`` into the record and return it, or raise CameraNotFoundError."""

    @abstractmethod
    def delete(self, camera_id: str) -> None:
        """Remove the record or raise CameraNotFoundError."""
