import sys
from typing import Dict, List, Optional
from hkfetch.core.config import settings
from hkfetch.errors import NetworkError
from hkfetch.fetch import scraper
from hkfetch.fetch.base import Source
from hkfetch.fetch.extractors import extract_hk_pools, extract_hk_lotto
from hkfetch.fetch.utils import utc_now_iso
from hkfetch.output.writer import write_bundle
from hkfetch.schemas import FetchBundle, ResultEntry

def get_sources() -> List[Source]:
    """Sources in the order they are fetched"""
    return [
        Source(key="hk_pools", label="HK Pools", url=settings.HK_POOLS_URL, extract=extract_hk_pools),
        Source(key="hk_lotto", label="HK Lotto", url=settings.HK_LOTTO_URL, extract=extract_hk_lotto),
    ]

async def collect_source(source: Source) -> List[ResultEntry]:
    """
    Fetch and extract one source.

    A failure here only costs this source its rows: it is reported and an
    empty list is returned so the other source still gets written.
    """
    print(f"Fetching {source.label} data from {source.url}...")
    try:
        html = await scraper.fetch_html(source.url)
        entries = source.extract(html)
    except NetworkError as e:
        print(f"Error fetching {source.label}: {e}", file=sys.stderr)
        return []
    except Exception as e:
        print(f"Error parsing {source.label}: {e}", file=sys.stderr)
        return []

    print(f"Found {len(entries)} {source.label} entries")
    return entries

async def build_bundle(sources: Optional[List[Source]] = None) -> FetchBundle:
    """Collect every source one after the other and stamp the result"""
    results: Dict[str, List[ResultEntry]] = {}
    for source in sources or get_sources():
        results[source.key] = await collect_source(source)

    return FetchBundle(last_updated=utc_now_iso(), **results)

async def run(output_path: Optional[str] = None) -> tuple[FetchBundle, str]:
    """
    Full pipeline: fetch -> extract -> merge -> write.
    Write failures propagate to the caller.
    """
    bundle = await build_bundle()
    path = write_bundle(bundle, output_path)
    return bundle, path
