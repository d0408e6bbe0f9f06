import asyncio
import sys
from hkfetch.core.config import settings
from hkfetch.services.collect import run

def _rule() -> None:
    print("=" * settings.RULE_WIDTH)

def print_summary(bundle, path: str) -> None:
    _rule()
    print(f"Data saved to: {path}")
    print(f"Last updated: {bundle.last_updated}")
    print(f"HK Pools entries: {len(bundle.hk_pools)}")
    print(f"HK Lotto entries: {len(bundle.hk_lotto)}")
    _rule()
    print("\nNow run these commands to push to GitHub:")
    print(f"  git add {path}")
    print('  git commit -m "Update HK data"')
    print("  git push origin main")

def main() -> int:
    """Entry point for the hk-data-fetcher command"""
    _rule()
    print("HK Data Fetcher")
    _rule()

    try:
        bundle, path = asyncio.run(run())
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        return 1

    print_summary(bundle, path)
    return 0

if __name__ == "__main__":
    sys.exit(main())
