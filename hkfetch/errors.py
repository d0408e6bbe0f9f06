class HKFetchError(Exception):
    """Base error for the HK data fetcher"""


class NetworkError(HKFetchError):
    """Raised when a page cannot be downloaded at the transport level"""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Failed to fetch {url}: {message}")
