SECRET_KEY = "test-secret-key"

# Unused by the memory backend, kept so scripts can still read it.
DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "payroll_portal_test",
}

DEBUG = False
LOG_LEVEL = "WARNING"

STORAGE_BACKEND = "memory"
AUTO_INIT_DB = False

SESSION_TTL_HOURS = 24
RATE_LIMIT_PER_MINUTE = 0
