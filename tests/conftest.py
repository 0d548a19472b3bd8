"""Root conftest — shared test configuration."""

import os

# Keep test output readable
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("LOG_FORMAT", "text")
