"""
Configuration management for the Open Graph extractor.
Handles environment variables and request settings.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Library configuration loaded from environment variables."""
    
    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "json")  # json or console
    
    # Request settings
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "30"))
    FOLLOW_REDIRECTS: bool = os.getenv("FOLLOW_REDIRECTS", "true").lower() == "true"
    USER_AGENT: str = os.getenv(
        "USER_AGENT",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    )
    
    @classmethod
    def request_headers(cls) -> dict:
        """Headers sent with every page request."""
        return {
            "User-Agent": cls.USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.5",
        }


config = Config()
