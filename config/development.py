import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

FIRESTORE_CONFIG = {
    "project_id": os.getenv("FIREBASE_PROJECT_ID", "azura-attendance-dev"),
    "credentials_path": os.getenv("GOOGLE_APPLICATION_CREDENTIALS", ""),
    # Local runs default to the Firestore emulator
    "emulator_host": os.getenv("FIRESTORE_EMULATOR_HOST", "localhost:8080"),
}

# Pre-shared key carried by the mobile client in `isoKey`
CHECKIN_MASTER_KEY = os.getenv("CHECKIN_MASTER_KEY", "AZURA_SECURE")

TIMEZONE = os.getenv("APP_TIMEZONE", "Asia/Jakarta")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

SSE_KEEPALIVE_SECONDS = float(os.getenv("SSE_KEEPALIVE_SECONDS", "15"))
