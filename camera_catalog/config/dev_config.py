import os

from camera_catalog.config.base_config import BaseConfig


class DevConfig(BaseConfig):
    def __init__(self):
        super().__init__()
        self.ENV = os.environ.get("FLASK_ENV", "development")
        self.DEBUG = os.environ.get("FLASK_DEBUG", "True").lower() == "true"
        self.PORT = int(os.environ.get("PORT", 8080))
        self.HOST = os.environ.get("HOST", "0.0.0.0")
