from .base import *

DEBUG = True
ALLOWED_HOSTS = ["*"]

INSTALLED_APPS += [
    "debug_toolbar",
]

MIDDLEWARE.insert(0, "debug_toolbar.middleware.DebugToolbarMiddleware")

INTERNAL_IPS = [
    "127.0.0.1",
]

# single-tenant local runs: no header needed
TENANT_DEFAULT_CODE = os.getenv("TENANT_DEFAULT_CODE", "dev")

LOGGING["loggers"]["apps"]["level"] = "DEBUG"
