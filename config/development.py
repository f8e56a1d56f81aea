import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# "file" keeps one file per entry under DATA_DIR; "mysql" uses DB_CONFIG.
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
DATA_DIR = os.getenv("DATA_DIR", "data")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker"),
}
KV_TABLE = os.getenv("KV_TABLE", "tracker_kv")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
