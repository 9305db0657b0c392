"""Internal constants shared across the library."""

BASE_URL = "https://www.toontownrewritten.com"
USER_AGENT = "TTR Rewatched pyttr client"

INVASIONS_ENDPOINT = "/api/invasions"
FIELD_OFFICES_ENDPOINT = "/api/fieldoffices"

UNKNOWN_LOCATION = "Unknown Location"

# Field office difficulty as reported by the API (0-based, shown as 1-5 stars).
MIN_DIFFICULTY = 0
MAX_DIFFICULTY = 4
