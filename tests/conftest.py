"""Root conftest — shared test configuration."""

import os

# Keep test runs quiet and independent of a developer's .env
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("API_PREFIX", "/api/v1")
