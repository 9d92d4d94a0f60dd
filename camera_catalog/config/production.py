import os

from camera_catalog.config.base_config import BaseConfig


class ProductionConfig(BaseConfig):
    def __init__(self):
        super().__init__()
        self.ENV = os.environ.get("FLASK_ENV", "production")
        self.DEBUG = os.environ.get("FLASK_DEBUG", "False").lower() == "true"
        self.PORT = int(os.environ.get("PORT", 80))
        self.HOST = os.environ.get("HOST", "0.0.0.0")
        self.JWT_COOKIE_SECURE = True
