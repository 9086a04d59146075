# company_search/config.py
from dotenv import load_dotenv
import os

load_dotenv()

# API Keys
COMPANIES_HOUSE_API_KEY = os.getenv("COMPANIES_HOUSE_API_KEY")
OPENCORPORATES_API_TOKEN = os.getenv("OPENCORPORATES_API_TOKEN")

# Per-jurisdiction OpenCorporates searches, in priority order
OPENCORPORATES_JURISDICTIONS = [
    code.strip()
    for code in os.getenv("OPENCORPORATES_JURISDICTIONS", "us_de,ie").split(",")
    if code.strip()
]

# Runtime parameters
PAGE_SIZE = int(os.getenv("PAGE_SIZE", "12"))
CONCURRENCY = 50
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
USER_AGENT = "NDA-Generator/1.0"
BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

# Timeouts (seconds)
# Covers one search call plus one enrichment round (8s + 5s)
SOURCE_DEADLINE = float(os.getenv("SOURCE_DEADLINE", "14"))
DEADLINE_MARGIN = 0.5
REQUEST_TIMEOUT = 8.0
OPENCORPORATES_TIMEOUT = 10.0
PROFILE_TIMEOUT = 5.0
DETAILS_TIMEOUT = 10.0

# URLs
COMPANIES_HOUSE_API_URL = "https://api.company-information.service.gov.uk"
ESTONIA_AUTOCOMPLETE_URLS = [
    "https://ariregister.rik.ee/est/api/autocomplete",
    "https://ariregister.rik.ee/eng/api/autocomplete",
]
ARES_SEARCH_URL = "https://ares.gov.cz/ekonomicke-subjekty-v-be/rest/ekonomicke-subjekty/vyhledat"
OPENCORPORATES_SEARCH_URL = "https://api.opencorporates.com/v0.4/companies/search"
OPENCORPORATES_HOSTS = ("opencorporates.com", "api.opencorporates.com", "www.opencorporates.com")

# Result page sizes requested from each registry
COMPANIES_HOUSE_PAGE = 5
ARES_PAGE = 8
OPENCORPORATES_PAGE = 8
