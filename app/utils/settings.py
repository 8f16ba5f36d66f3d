# app/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

# brak domyslnej wartosci, aplikacja nie wstanie bez bazy
DATABASE_URL = os.getenv("DATABASE_URL")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")
HTTP_TIMEOUT = int(os.getenv("HTTP_TIMEOUT", 10))
