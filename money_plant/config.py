# money_plant/config.py
import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class Config:
    # SQLite database file
    DB_PATH = os.environ.get("DB_PATH", os.path.join(BASE_DIR, "data", "money_plant.db"))

    # JWT signing key for login tokens
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "dev-key-for-money-plant-only-change-me")

    # Static uploads served under /uploads
    UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER", os.path.join(BASE_DIR, "uploads"))

    # Request bodies up to 100 MB
    MAX_CONTENT_LENGTH = 100 * 1024 * 1024

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    PORT = int(os.environ.get("PORT", 3001))
