"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

ATTENDANCE_COLLECTION = "attendance_logs"

FIELD_STUDENT_ID = "studentId"
FIELD_NAME = "name"
FIELD_CLASS_NAME = "className"
FIELD_GRADE_NAME = "gradeName"
FIELD_TIMESTAMP = "timestamp"
FIELD_STATUS = "status"
FIELD_DISTANCE_SCORE = "distanceScore"
FIELD_VERIFIED_BY = "verifiedBy"
FIELD_SCHOOL_ID = "schoolId"

DEFAULT_CLASS_NAME = "General"
DEFAULT_GRADE = "-"
VERIFIED_BY = "AzuraCloudShield"

DISTANCE_DECIMALS = 5
DISTANCE_SIGNATURE_DIGIT = "1"

DEFAULT_MASTER_KEY = "AZURA_SECURE"
DEFAULT_TIMEZONE = "Asia/Jakarta"

# Dashboard display defaults
UNKNOWN_NAME = "Unknown"
MISSING_TIME = "--:--"
MISSING_CLASS = "-"
DEFAULT_LIVE_STATUS = "ALPHA"
TIME_FORMAT = "%H:%M"

ALL_CLASSES = "Semua Kelas"
DEFAULT_HISTORY_DAYS = 7
