"""
Configuration Settings for Last Call Store Finder
All constants used by the discovery pipeline and alerts
"""

import os
from dotenv import load_dotenv
from pathlib import Path
from datetime import datetime

# ============================================
# LOAD .ENV FROM PROJECT ROOT
# ============================================

# Get project root (parent of config directory)
config_dir = Path(__file__).parent
project_root = config_dir.parent

env_path = project_root / '.env'
load_dotenv(dotenv_path=env_path)

# ============================================
# UPSTREAM RETRIEVAL SERVICE
# ============================================
API_KEY = os.getenv("API_KEY")
GEMINI_MODEL = "gemini-2.5-flash"

# How many stores the prompt asks for
STORE_RESULT_COUNT = 5
STORE_CATEGORY_LABEL = "liquor stores, beer stores, or wine shops"

# ============================================
# MAP DEEP LINKS
# ============================================
MAPS_SEARCH_URL = "https://www.google.com/maps/search/"

# ============================================
# PARSER FALLBACKS
# ============================================
ADDRESS_UNKNOWN = "Address unknown"
CLOSING_TIME_UNKNOWN = "Check hours"

# ============================================
# URGENCY CLASSIFICATION
# ============================================
URGENCY_HIGH_HOUR = 21    # 9 PM onwards
URGENCY_MEDIUM_HOUR = 18  # 6 PM onwards
URGENCY_KEYWORD = "soon"

# ============================================
# CLOSING ALERTS
# ============================================
ALERT_CHECK_INTERVAL_SECONDS = 30
ALERT_WINDOW_MINUTES = 30
ALERT_TITLE = "Last Call!"
ALERT_BODY_TEMPLATE = "{name} is closing at {closing_time}. Better hurry!"
ALERT_ICON_URL = "https://cdn-icons-png.flaticon.com/512/2405/2405479.png"

# ============================================
# USER-FACING MESSAGES
# ============================================
MSG_GEOLOCATION_UNSUPPORTED = "Geolocation is not supported by your browser."
MSG_GEOLOCATION_DENIED = "Permission denied. We need location to find nearby stores."
MSG_DISCOVERY_FAILED = "Failed to fetch store data. Please try again."
MSG_NOTIFICATIONS_DENIED = (
    "Notifications are blocked. Allow them in your browser settings "
    "to get closing alerts."
)


# ============================================
# CLOCK
# ============================================

def get_local_now():
    """Get current local time as a timezone-aware datetime"""
    return datetime.now().astimezone()
