import os

SECRET_KEY = "test-secret"

API_BASE_URL = os.getenv("API_BASE_URL", "http://api.test")

REQUEST_TIMEOUT = 5
NOTIFICATION_TIMEOUT = 5.0

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
