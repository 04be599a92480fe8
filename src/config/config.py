"""Project-wide single-source configuration constants for the traffic reports dashboard."""

# ------ Backend -------
BACKEND_URL_ENV: str = "BACKEND_URL"
DEFAULT_BACKEND_URL: str = "http://localhost:3000"   # local development backend
SUMMARY_PATH: str = "/api/dashboard/summary"
RECENT_ACTIVITY_PATH: str = "/api/dashboard/recent-activity"
FETCH_TIMEOUT_S: float = 10.0                          # whole-request deadline, body included

# ------ Logging -------
LOG_LEVEL_ENV: str = "DASHBOARD_LOG_LEVEL"
DEFAULT_LOG_LEVEL: str = "INFO"

# ------ Page -------
PAGE_TITLE: str = "Traffic Buddy Dashboard"
LOADING_MESSAGE: str = "Loading dashboard data..."
FETCH_ERROR_MESSAGE: str = "Failed to load dashboard data. Please try again later."

# ------ Recent activity -------
RECENT_ACTIVITY_LIMIT: int = 5       # rows shown in the table
ADDRESS_SEGMENTS: int = 2            # comma-separated address parts kept for display
DISPLAY_TZ: str = "UTC"              # e.g. "UTC", "Asia/Kolkata"

# ------ Radial cards -------
RADIAL_INNER_RADIUS: int = 20
RADIAL_OUTER_RADIUS: int = 35
RADIAL_HEIGHT: int = 100             # pixels

# ------ Chart titles -------
TIME_SERIES_TITLE: str = "Reports Per Day"
CATEGORY_TITLE: str = "Report Categories"
DIVISION_TITLE: str = "Infractions By Division"
TOTAL_REPORTS_TITLE: str = "Total Traffic Reports"

# ------ Division chart -------
# Static reference figures; the backend exposes no per-division endpoint.
DIVISION_INFRACTIONS: tuple[tuple[str, int], ...] = (
    ("North", 412),
    ("South", 356),
    ("East", 298),
    ("West", 331),
    ("Central", 467),
)
