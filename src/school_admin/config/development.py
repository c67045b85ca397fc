import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Root of the REST API; resource paths are appended as /v1/<resource>
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8080/api")

REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "30"))
NOTIFICATION_TIMEOUT = float(os.getenv("NOTIFICATION_TIMEOUT", "5"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
