"""Constants for the Iran Post tracking integration."""

DOMAIN = "iranpost"
INTEGRATION_NAME = "Iran Post Parcel Tracking"

# Tracking portal
TRACKING_URL = "https://tracking.post.ir/"
TRACKING_ORIGIN = "https://tracking.post.ir"

# Browser-like headers, the portal rejects bare scripted clients
USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64; rv:140.0) Gecko/20100101 Firefox/140.0"
BASE_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Accept-Encoding": "gzip, deflate",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
}

# ASP.NET hidden fields (element ids on the landing page)
FIELD_VIEWSTATE = "__VIEWSTATE"
FIELD_VIEWSTATE_GENERATOR = "__VIEWSTATEGENERATOR"
FIELD_EVENT_VALIDATION = "__EVENTVALIDATION"
FIELD_VIEWSTATE_ENCRYPTED = "__VIEWSTATEENCRYPTED"
FIELD_EVENT_TARGET = "__EVENTTARGET"
FIELD_EVENT_ARGUMENT = "__EVENTARGUMENT"
FIELD_SEARCH = "txtbSearch"
FIELD_VOTE_REASON = "txtVoteReason"
FIELD_VOTE_TEL = "txtVoteTel"
SEARCH_BUTTON_TARGET = "btnSearch"

# Result page markup
CSS_ROW = "row"
CSS_DATA_ROW = "newrowdata"
CSS_DATA_CELL = "newtddata"
CSS_HEADER_CELL = "newtdheader"
CSS_ALERT = ".alert-danger, .alert-warning"
NOT_FOUND_PHRASE = "یافت نشد"

# Request timeouts in seconds
REQUEST_TIMEOUT = 30
CONNECT_TIMEOUT = 10
READ_TIMEOUT = 20

# Refresh
DEFAULT_UPDATE_INTERVAL = 60 * 60  # 1 hour
META_LAST_REFRESH = "lastRefresh"

# Calendar
# Year tokens in tracking headers are only accepted inside this Jalali century
JALALI_CENTURY_PREFIX = "14"

PERSIAN_MONTHS = (
    "فروردین",
    "اردیبهشت",
    "خرداد",
    "تیر",
    "مرداد",
    "شهریور",
    "مهر",
    "آبان",
    "آذر",
    "دی",
    "بهمن",
    "اسفند",
)

# Indexed by date.weekday(), 0 is Monday
PERSIAN_WEEKDAYS = (
    "دوشنبه",
    "سه‌شنبه",
    "چهارشنبه",
    "پنجشنبه",
    "جمعه",
    "شنبه",
    "یکشنبه",
)

LABEL_TODAY = "امروز"
LABEL_TOMORROW = "فردا"
LABEL_YESTERDAY = "دیروز"
PERIOD_AM = "ق.ظ"
PERIOD_PM = "ب.ظ"
