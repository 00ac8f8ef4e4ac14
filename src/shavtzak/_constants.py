"""Internal constants shared across the library."""

STORAGE_KEY = "shavtzak-data"
EXPORT_FILENAME = "shavtzak-data.json"
DEFAULT_DATA_DIR = "~/.shavtzak"

# ------------------------------------------------------------------
# Form rules
# ------------------------------------------------------------------

PERSON_ID_PATTERN = r"^\d{7}$"
VEHICLE_ID_PATTERN = r"^\d{5,9}$"
MIN_NAME_WORDS = 2

PERSON_ID_MESSAGE = "מספר אישי חייב להיות 7 ספרות בדיוק"
VEHICLE_ID_MESSAGE = "מספר רכב חייב להיות בין 5-9 ספרות"
FULL_NAME_MESSAGE = "יש להזין שם פרטי ושם משפחה"
REQUIRED_MESSAGE = "שדה חובה"
IMPORT_FAILED_MESSAGE = "שגיאה בקריאת הקובץ"

# ------------------------------------------------------------------
# Report labels
# ------------------------------------------------------------------

GOAL_LABEL = "מטרת השיירה"
DATE_LABEL = "תאריך"
TIME_LABEL = "שעה"
STAY_LABEL = "שהיה"
NO_STAY_LABEL = "ללא שהיה"
