import os
from dotenv import load_dotenv

load_dotenv()

APP_TITLE = os.getenv("APP_TITLE", "Weekday Service API")

# Empty REDIS_URL selects the in-memory cache backend
REDIS_URL = os.getenv("REDIS_URL", "")
CACHE_PREFIX = os.getenv("CACHE_PREFIX", "weekday-service")
CACHE_EXPIRE = int(os.getenv("CACHE_EXPIRE", "60"))

LOG_DIR = os.getenv("LOG_DIR", os.path.join(os.getcwd(), "logs"))
