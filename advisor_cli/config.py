"""
Configuration management for CLI app
"""
from pydantic import BaseModel, Field
from dotenv import load_dotenv
import os


class Config(BaseModel):
    """Client configuration loaded from .env file"""

    api_base_url: str = Field(default="http://127.0.0.1:3000")
    api_timeout: int = Field(default=60)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from .env file with sensible defaults"""
        load_dotenv()
        return cls(
            api_base_url=os.getenv("ADVISOR_API_URL", "http://127.0.0.1:3000"),
            api_timeout=int(os.getenv("ADVISOR_API_TIMEOUT", "60")),
        )
