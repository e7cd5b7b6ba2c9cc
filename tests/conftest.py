import os
import warnings

warnings.filterwarnings("ignore", category=DeprecationWarning, module="beanie.*")

# Set test environment variables before app configuration is imported
os.environ.setdefault("WATCH_IP_HASH_SECRET", "test-secret")
os.environ.setdefault("ENFORCE_IP_BINDING_WHEN_CODE_PROVIDED", "true")
os.environ.setdefault("TRUST_PROXY_HEADERS", "false")

# Import fixtures so they are available to all tests
from tests.fixtures.mongo_fixtures import *  # noqa: E402, F403
from tests.fixtures.watch_fixtures import *  # noqa: E402, F403
