"""
Configuration file untuk Record Teamwork form access
Semua setting global ada di sini
"""

import re

# ===== FORM ACCESS KEYS =====
# Form-level identifiers
FORM_BASE_URL_KEY = 'RECORD_TEAMWORK_FORM_BASE_URL'
FORM_ID_KEY = 'RECORD_TEAMWORK_FORM_ID'
FORM_KEYS = (FORM_BASE_URL_KEY, FORM_ID_KEY)

# Items addressed when the form design itself is updated (setChoiceValues)
EDIT_ITEM_KEYS = (
    'EDIT_DURATION_CATEGORY_ITEM_ID',
    'EDIT_OTHER_CATEGORY_ITEM_ID',
)

# Items addressed when an instance of the form is pre-populated for a player
FILL_ITEM_KEYS = (
    'EMAIL_ITEM_ID',
    'FIRST_NAME_ITEM_ID',
    'LAST_NAME_ITEM_ID',
    'DATE_PERFORMED_ITEM_ID',
    'DURATION_CATEGORY_ITEM_ID',
    'DESCRIPTION_ITEM_ID',
)

FORM_ACCESS_KEYS = FORM_KEYS + EDIT_ITEM_KEYS + FILL_ITEM_KEYS

KEY_GROUPS = {
    **{key: 'form' for key in FORM_KEYS},
    **{key: 'edit' for key in EDIT_ITEM_KEYS},
    **{key: 'fill' for key in FILL_ITEM_KEYS},
}

# Keys whose values are never shown in logs or status output
SECRET_KEYS = (FORM_ID_KEY,)

# ===== PLACEHOLDER VALUES =====
FORM_BASE_URL_PLACEHOLDER = 'Your form base URL goes here'
FORM_ID_PLACEHOLDER = 'Your form ID goes here'
ITEM_ID_PLACEHOLDER = 'Your form item ID goes here'
PLACEHOLDER_VALUES = (FORM_BASE_URL_PLACEHOLDER, FORM_ID_PLACEHOLDER, ITEM_ID_PLACEHOLDER)

PLACEHOLDER_PATTERN = re.compile(r'^your\b.*\bgoes here\.?$', re.IGNORECASE)


def placeholder_for(key: str) -> str:
    """Placeholder text shipped in templates for a key"""
    if key == FORM_BASE_URL_KEY:
        return FORM_BASE_URL_PLACEHOLDER
    if key == FORM_ID_KEY:
        return FORM_ID_PLACEHOLDER
    return ITEM_ID_PLACEHOLDER


def is_placeholder(value: str) -> bool:
    """True if value is template text the operator has not replaced yet"""
    text = value.strip()
    return text in PLACEHOLDER_VALUES or bool(PLACEHOLDER_PATTERN.match(text))


# ===== CONFIG SOURCES =====
CONFIG_PATH_ENV = 'FORM_ACCESS_CONFIG'
SUPPORTED_CONFIG_EXTENSIONS = ['.json', '.env', '.py']

# ===== HTTP REQUEST SETTINGS =====
REQUEST_CONFIG = {
    'headers': {
        'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36'
    },
    'timeout': 30,  # seconds
    'retries': 3,
    'retry_delay': 1  # seconds
}

# ===== LOGGING SETTINGS =====
LOGGING_CONFIG = {
    'level_env': 'LOG_LEVEL',
    'default_level': 'INFO',
    'format': '%(asctime)s - %(levelname)s - %(message)s'
}

# ===== API SETTINGS =====
API_CONFIG = {
    'title': 'Record Teamwork Form Access API',
    'version': '1.0.0',
    'host': '0.0.0.0',
    'port': 8000
}
