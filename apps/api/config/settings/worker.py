# apps/api/config/settings/worker.py

from .base import *
import os

# worker needs no URLConf
ROOT_URLCONF = None

DEBUG = False

# ==================================================
# Celery (required on workers)
# ==================================================

CELERY_BROKER_URL = os.environ["CELERY_BROKER_URL"]
CELERY_RESULT_BACKEND = os.environ.get("CELERY_RESULT_BACKEND", CELERY_BROKER_URL)
