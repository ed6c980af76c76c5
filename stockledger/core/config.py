import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    # Remote inventory/transaction store
    api_url: str = os.getenv("STOCKLEDGER_API_URL", "http://127.0.0.1:8000")
    api_timeout: float = float(os.getenv("STOCKLEDGER_API_TIMEOUT", "10"))
    api_retries: int = int(os.getenv("STOCKLEDGER_API_RETRIES", "2"))

    # Inventory status alerts
    low_stock_threshold: float = float(os.getenv("LOW_STOCK_THRESHOLD", "3"))
    status_poll_interval: float = float(os.getenv("STATUS_POLL_INTERVAL", "30"))

    users_cache_ttl: float = float(os.getenv("USERS_CACHE_TTL", "60"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
