SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
DATA_DIR = "data-test"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
