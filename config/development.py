import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = bool(int(os.getenv("DEBUG", "1")))

# Random source for dashboard figures; unset means a fresh seed per process
MOCK_RANDOM_SEED = int(os.environ["MOCK_RANDOM_SEED"]) if os.getenv("MOCK_RANDOM_SEED") else None

DASHBOARD_DEPARTMENT = os.getenv("DASHBOARD_DEPARTMENT", "MCA")

QUERY_STALE_SECONDS = int(os.getenv("QUERY_STALE_SECONDS", "300"))
QUERY_MAX_RETRIES = int(os.getenv("QUERY_MAX_RETRIES", "2"))

# Exposes POST /admin/reset to restore the seed data
ENABLE_RESET_ENDPOINT = bool(int(os.getenv("ENABLE_RESET_ENDPOINT", "1")))
