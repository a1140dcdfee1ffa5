import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "ponto_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

STANDARD_JOURNEY_MINUTES = int(os.getenv("STANDARD_JOURNEY_MINUTES", "480"))
OVERTIME_TOLERANCE_MINUTES = int(os.getenv("OVERTIME_TOLERANCE_MINUTES", "11"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
