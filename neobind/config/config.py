import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    # Binding table (created before first run; see data.csv in the repo root)
    DATA_FILE = os.getenv("NEOBIND_DATA_FILE", "data.csv")

    # Dev server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3000"))
    DEBUG = os.getenv("DEBUG", "0") == "1"

    APP_ENV = os.getenv("FLASK_ENV", "production")
