from camera_catalog import create_app
from camera_catalog.storage import get_storage


def seed_cameras(app):
    # Create initial cameras
    cameras = [
        {'make': 'Canon', 'model': 'EOS R5', 'description': 'Full-frame mirrorless body'},
        {'make': 'Nikon', 'model': 'Z6 II', 'description': 'Hybrid stills and video camera'},
        {'make': 'Fujifilm', 'model': 'X-T4', 'description': 'APS-C with in-body stabilisation'},
    ]

    # Use application context to interact with the storage backend
    with app.app_context():
        storage = get_storage()
        storage.init_schema()
        for camera in cameras:
            storage.create(dict(camera, createdBy='Anonymous'))

    print(f"{len(cameras)} cameras seeded successfully.")


if __name__ == "__main__":
    seed_cameras(create_app())
