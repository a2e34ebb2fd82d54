"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EMPLOYEES_RANGE = "Employees!A:D"
ATTENDANCE_RANGE = "Attendance!A:G"
LEAVE_RANGE = "Leave!A:H"

# Row 1 of every tab holds column titles.
HEADER_ROWS = 1

LEAVE_STATUS_COLUMN = "G"

EMPLOYEES_HEADER = ["id", "name", "password", "isAdmin"]
ATTENDANCE_HEADER = ["empId", "date", "checkIn", "checkOut", "location", "isLate", "isHalfDay"]
LEAVE_HEADER = ["empId", "id", "type", "fromDate", "toDate", "reason", "status", "appliedOn"]

DEFAULT_TOKEN_TTL_SECONDS = 3600
TOKEN_SALT = "attendance-sheets-session"

# Plaintext rows are already readable in the sheet; the in-memory hash of
# those only serves constant-time comparison, so loads use a cheap method.
LEGACY_HASH_METHOD = "pbkdf2:sha256:1000"
