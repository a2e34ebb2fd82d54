import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Signs the bearer tokens handed out by /api/login
TOKEN_SECRET = os.getenv("JWT_SECRET", "dev-token-secret")
TOKEN_TTL_SECONDS = int(os.getenv("TOKEN_TTL_SECONDS", "3600"))

SHEETS_CONFIG = {
    "spreadsheet_id": os.getenv("SPREADSHEET_ID", ""),
    # Full service-account JSON, or a path to the key file
    "service_account_key": os.getenv("GOOGLE_SERVICE_ACCOUNT_KEY", ""),
    "service_account_file": os.getenv("GOOGLE_SERVICE_ACCOUNT_FILE", ""),
}

PORT = int(os.getenv("PORT", "3000"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# mirror_first: reads see a write even if the spreadsheet rejects it
# store_first: the mirror only changes after the spreadsheet accepted the row
WRITE_POLICY = os.getenv("WRITE_POLICY", "mirror_first")

# Load the mirror in a background thread and start serving right away
LOAD_ASYNC = bool(int(os.getenv("LOAD_ASYNC", "1")))
# Serve /api requests while the first load is still running
SERVE_WHILE_LOADING = bool(int(os.getenv("SERVE_WHILE_LOADING", "0")))
