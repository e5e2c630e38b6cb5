import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timecheck_db"),
}

# Operating timezone: decides which calendar day a scan belongs to
TIMEZONE = os.getenv("TIMEZONE", "America/Mexico_City")

# Barcode wedge heuristics
SCANNER = {
    "inter_char_ms": int(os.getenv("SCANNER_INTER_CHAR_MS", "100")),
    "min_length": int(os.getenv("SCANNER_MIN_LENGTH", "3")),
    "inactivity_ms": int(os.getenv("SCANNER_INACTIVITY_MS", "1000")),
}

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
