"""Settings used by the test suite."""

from .settings import *  # noqa: F401,F403

MONGODB_CONNECT_ON_STARTUP = False
MONGODB_DEBUG = False
MONGODB_DB_NAME = "productsDatabase_test"
