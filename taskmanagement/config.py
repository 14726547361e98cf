"""Runtime configuration for the Task Management backend."""
import os
from dotenv import load_dotenv

# Load environment variables from a local .env file if present
load_dotenv()

DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./task_management.db")
IS_SQLITE = DATABASE_URL.startswith("sqlite")

# JWT signing configuration
AUTH_SECRET = os.environ.get("AUTH_SECRET", "dev-secret-change-me-0mbJv2O1s7AApOa1")
JWT_ALGORITHM = os.environ.get("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.environ.get("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))

# CORS
ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")
FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:3000")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
