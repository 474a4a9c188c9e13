# forum/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file

class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Forum API"
    env: str = os.getenv("ENV", "dev")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # All REST routes are mounted under this prefix
    api_prefix: str = "/api"

    # CORS origins for the frontend (cookie-based sessions need explicit origins)
    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Create missing tables at startup; keep off in production and use Aerich migrations
    generate_schemas: bool = os.getenv("GENERATE_SCHEMAS", "true" if os.getenv("ENV", "dev") == "dev" else "false").lower() in ("true", "1", "yes")

    # Name of the HttpOnly cookie carrying the session token
    session_cookie: str = os.getenv("SESSION_COOKIE", "accessToken")

settings = Settings()  # Instantiate configuration
