SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

MOCK_RANDOM_SEED = 1234

DASHBOARD_DEPARTMENT = "MCA"

QUERY_STALE_SECONDS = 300
QUERY_MAX_RETRIES = 2

ENABLE_RESET_ENDPOINT = True
