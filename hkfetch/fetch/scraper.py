import httpx
from typing import Optional
from hkfetch.core.config import settings
from hkfetch.errors import NetworkError

async def fetch_html(url: str, transport: Optional[httpx.AsyncBaseTransport] = None) -> str:
    """
    Fetch the raw body of a page.

    Only the User-Agent header is sent. The status code is not checked: an
    error page is returned like any other body and simply yields no rows.
    """
    headers = {"User-Agent": settings.USER_AGENT}
    try:
        async with httpx.AsyncClient(
            timeout=settings.REQUEST_TIMEOUT,
            headers=headers,
            transport=transport,
        ) as client:
            response = await client.get(url)
            return response.text
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise NetworkError(url, str(e) or type(e).__name__) from e
