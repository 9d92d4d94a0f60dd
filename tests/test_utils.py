import re
import warnings
from datetime import datetime, timedelta, timezone

from camera_catalog.utils import allowed_image, safe_blob_name


def test_safe_blob_name_uses_utc_timestamp():
    with warnings.catch_warnings():
        warnings.simplefilter('error', DeprecationWarning)
        name = safe_blob_name('my photo.JPG')

    match = re.fullmatch(r'(\d{4}-\d{2}-\d{2}-\d{12})-my_photo\.JPG', name)
    assert match
    stamp = datetime.strptime(match.group(1), '%Y-%m-%d-%H%M%S%f').replace(tzinfo=timezone.utc)
    assert abs(datetime.now(timezone.utc) - stamp) < timedelta(minutes=1)


def test_allowed_image():
    allowed = {'png', 'jpg'}
    assert allowed_image('camera.PNG', allowed)
    assert not allowed_image('camera.gif', allowed)
    assert not allowed_image('camera', allowed)
