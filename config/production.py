import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEFAULT_TICKET_ASSIGNEE = os.getenv("DEFAULT_TICKET_ASSIGNEE", "")
