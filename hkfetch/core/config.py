from typing import Optional


class Settings:
    # Sources
    HK_POOLS_URL: str = "https://tabelsemalam.com/"
    HK_LOTTO_URL: str = "https://masterlive.net/pengeluaran-hk-tercepat.php"

    # Scraping
    USER_AGENT: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
    # None disables the timeout
    REQUEST_TIMEOUT: Optional[float] = None

    # Output
    OUTPUT_PATH: str = "data/hk-data.json"

    # Console
    RULE_WIDTH: int = 50

settings = Settings()
