import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", f"sqlite:///{BASE_DIR / 'dailytrack.db'}")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # "sql" keeps everything in the database, "local" keeps tracking records in a JSON file
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "sql")
    LOCAL_STORE_PATH = os.getenv("LOCAL_STORE_PATH", str(BASE_DIR / "dailytrack-local.json"))

    TIMEZONE = os.getenv("TIMEZONE", "UTC")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    PROTEIN_GOAL_G = float(os.getenv("PROTEIN_GOAL_G", 100))
    WATER_GOAL_ML = float(os.getenv("WATER_GOAL_ML", 4000))
    GLASS_ML = 250
    WATER_QUICK_AMOUNTS = (250, 500, 1000)


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    STORAGE_BACKEND = "sql"
    LOG_LEVEL = "WARNING"
