"""
Single place to:
- Load env vars from .env if present
- Read the app settings (environment, log level, CORS, secret source)
- Configure logging for the whole process
"""

import logging
import os

from dotenv import load_dotenv

# 1) Load env vars from .env if present
# dev convenience; in prod the platform injects env vars
load_dotenv()

# 2) App environment ("local", "test", "prod", ...)
APP_ENV = os.getenv("APP_ENV", "local")

# 3) Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# 4) CORS origins, comma separated. "*" allows everything (dev default).
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# 5) Where secrets come from.
#    local      -> secrets.randbelow, never touches the network
#    random_org -> random.org with a local fallback
RANDOM_SOURCES = ("local", "random_org")
RANDOM_SOURCE = os.getenv("CODEBREAKER_RANDOM_SOURCE", "local").strip().lower()
if RANDOM_SOURCE not in RANDOM_SOURCES:
    RANDOM_SOURCE = "local"

try:
    RANDOM_TIMEOUT = float(os.getenv("CODEBREAKER_RANDOM_TIMEOUT", "3.0"))
except ValueError:
    RANDOM_TIMEOUT = 3.0


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Apply the process-wide logging config. Unknown levels fall back to INFO."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
    )
