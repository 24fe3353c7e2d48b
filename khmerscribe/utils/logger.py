import os
import sys
import logging
from dotenv import load_dotenv

# Configured before khmerscribe.config, so read .env here too
load_dotenv()


def resolve_log_level(environment: str = None, override: str = None) -> str:
    """LOG_LEVEL if set, else DEBUG in development and INFO in production."""
    if override:
        return override.upper()
    environment = (environment or "development").lower()
    return "INFO" if environment == "production" else "DEBUG"


logging_str = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"
logging_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), "logs")
logging_path = os.path.join(logging_dir, "khmerscribe.log")
log_level = resolve_log_level(os.getenv("ENVIRONMENT"), os.getenv("LOG_LEVEL"))

os.makedirs(logging_dir, exist_ok=True)

logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format=logging_str,
    handlers=[
        logging.FileHandler(logging_path, encoding="utf-8"),
        logging.StreamHandler(sys.stdout)
    ]
)

logging = logging.getLogger('khmerscribe')
