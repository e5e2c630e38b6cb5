import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "timecheck"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timecheck_db"),
}

TIMEZONE = os.getenv("TIMEZONE", "America/Mexico_City")

SCANNER = {
    "inter_char_ms": int(os.getenv("SCANNER_INTER_CHAR_MS", "100")),
    "min_length": int(os.getenv("SCANNER_MIN_LENGTH", "4")),
    "inactivity_ms": int(os.getenv("SCANNER_INACTIVITY_MS", "500")),
}

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
