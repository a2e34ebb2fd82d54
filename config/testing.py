SECRET_KEY = "test-secret"

TOKEN_SECRET = "test-token-secret"
TOKEN_TTL_SECONDS = 3600

SHEETS_CONFIG = {
    "spreadsheet_id": "test-spreadsheet",
    "service_account_key": "",
    "service_account_file": "",
}

PORT = 3000

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

WRITE_POLICY = "mirror_first"

# Tests need a fully loaded mirror before the first request
LOAD_ASYNC = False
SERVE_WHILE_LOADING = False
