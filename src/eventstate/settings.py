"""Settings for eventstate.

Values come from the environment (or a `.env` / `settings.ini` file) via python-decouple.
"""

from decouple import config

DEBUG = config("DEBUG", default=False, cast=bool)

# Service identification
SERVICE_NAME = config("SERVICE_NAME", default="eventstate")
DEPLOYMENT_ENVIRONMENT = config("DEPLOYMENT_ENVIRONMENT", default="development" if DEBUG else "production")

# Logging
LOG_LEVEL = config("LOG_LEVEL", default="DEBUG" if DEBUG else "INFO")
LOG_JSON = config("LOG_JSON", default=not DEBUG, cast=bool)

# Evaluation
EVENTSTATE_LOG_EVALUATIONS = config("EVENTSTATE_LOG_EVALUATIONS", default=False, cast=bool)
EVENTSTATE_NEARLY_FULL_RATIO = config("EVENTSTATE_NEARLY_FULL_RATIO", default=0.8, cast=float)
