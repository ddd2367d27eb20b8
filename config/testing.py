SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

SESSION_DAYS = 1

SEED_DEMO_DATA = True

LOG_LEVEL = "WARNING"

DEFAULT_TICKET_ASSIGNEE = "it@company.com"
