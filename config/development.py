import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

# Permanent session lifetime in days ("remember me")
SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))

# Demo accounts, tickets, projects and tasks on startup
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Email of the IT user new tickets are assigned to
DEFAULT_TICKET_ASSIGNEE = os.getenv("DEFAULT_TICKET_ASSIGNEE", "it@company.com")
