# notes_api/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file

class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Notes API"
    env: str = os.getenv("ENV", "dev")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3500"))

    # CORS origins for frontend
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # Password hashing work factor (bcrypt log2 rounds)
    bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", "10"))

    # Roles assigned by the model when none are given
    default_roles: list[str] = ["Employee"]

settings = Settings()  # Instantiate configuration
