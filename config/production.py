import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

TOKEN_SECRET = os.getenv("JWT_SECRET", "please-set-JWT_SECRET")
TOKEN_TTL_SECONDS = int(os.getenv("TOKEN_TTL_SECONDS", "3600"))

SHEETS_CONFIG = {
    "spreadsheet_id": os.getenv("SPREADSHEET_ID", ""),
    "service_account_key": os.getenv("GOOGLE_SERVICE_ACCOUNT_KEY", ""),
    "service_account_file": os.getenv("GOOGLE_SERVICE_ACCOUNT_FILE", ""),
}

PORT = int(os.getenv("PORT", "3000"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

WRITE_POLICY = os.getenv("WRITE_POLICY", "mirror_first")

LOAD_ASYNC = bool(int(os.getenv("LOAD_ASYNC", "1")))
SERVE_WHILE_LOADING = bool(int(os.getenv("SERVE_WHILE_LOADING", "0")))
