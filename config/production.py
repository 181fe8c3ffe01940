import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

FIRESTORE_CONFIG = {
    "project_id": os.getenv("FIREBASE_PROJECT_ID", ""),
    "credentials_path": os.getenv("GOOGLE_APPLICATION_CREDENTIALS", ""),
    "emulator_host": os.getenv("FIRESTORE_EMULATOR_HOST", ""),
}

CHECKIN_MASTER_KEY = os.getenv("CHECKIN_MASTER_KEY", "AZURA_SECURE")

TIMEZONE = os.getenv("APP_TIMEZONE", "Asia/Jakarta")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SSE_KEEPALIVE_SECONDS = float(os.getenv("SSE_KEEPALIVE_SECONDS", "15"))
