SECRET_KEY = "test-secret"

STORE_BACKEND = "memory"

DB_CONFIG = None

DEFAULT_ADMIN_PASSWORD = "admin"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
