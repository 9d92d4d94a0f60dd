from camera_catalog.config.dev_config import DevConfig
from camera_catalog.config.production import ProductionConfig
from camera_catalog.config.test_config import TestConfig


class Config:
    def __init__(self):
        self.dev_config = DevConfig()
        self.production_config = ProductionConfig()
        self.test_config = TestConfig()

    def get(self, env):
        if env == "production":
            return self.production_config
        if env == "testing":
            return self.test_config
        return self.dev_config
