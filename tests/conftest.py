"""Root conftest — shared test configuration."""

import os

# Ensure tests don't accidentally talk to a real vault
os.environ.setdefault("LOCAL_REST_API_URL", "http://vault.test")
os.environ.setdefault("LOCAL_REST_API_KEY", "test-fake-key")
os.environ.setdefault("LOCAL_REST_API_ENABLED", "false")
