"""Client singletons for external API interactions."""
from company_search.clients.http_client import HttpClient, UpstreamResponse, parse_json_body

__all__ = ["HttpClient", "UpstreamResponse", "parse_json_body"]
