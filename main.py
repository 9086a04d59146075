import asyncio
import json
import sys

from loguru import logger

from company_search.clients import HttpClient
from company_search.details import fetch_company_details
from company_search.handler import configure_logging
from company_search.service import search_companies


async def main(argv):
    """
    Run one registry search from the command line and print the JSON payload
    the form would receive.

    Usage:
        python main.py "Acme Ltd"
        python main.py --details https://opencorporates.com/companies/gb/01234567
    """
    configure_logging()

    if not argv:
        print(main.__doc__)
        return 2

    try:
        if argv[0] == "--details" and len(argv) > 1:
            details = await fetch_company_details(argv[1])
            payload = details.to_dict() if details else {"error": "Company not found"}
        else:
            response = await search_companies(" ".join(argv))
            payload = response.to_dict()
            logger.info(f"{len(response.results)} results")
    finally:
        # Cleanup: close the shared session to prevent unclosed connector warnings
        await HttpClient().close()

    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main(sys.argv[1:])))
