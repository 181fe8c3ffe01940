import os

SECRET_KEY = "test-secret"

FIRESTORE_CONFIG = {
    "project_id": os.getenv("FIREBASE_PROJECT_ID", "azura-attendance-test"),
    "credentials_path": "",
    "emulator_host": os.getenv("FIRESTORE_EMULATOR_HOST", "localhost:8080"),
}

CHECKIN_MASTER_KEY = "AZURA_SECURE"

TIMEZONE = "Asia/Jakarta"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SSE_KEEPALIVE_SECONDS = 0.05
