"""
Serverless entry point for the company search form.

Accepts API Gateway / Netlify style events and returns
{"statusCode", "headers", "body"} dictionaries.
"""
import asyncio
import base64
import json
import sys
from typing import Any, Dict

from loguru import logger

from company_search.clients import HttpClient
from company_search.config import LOG_LEVEL
from company_search.details import fetch_company_details
from company_search.errors import InputInvalid, SourceUnavailable
from company_search.service import search_companies

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
}
PREFLIGHT_HEADERS = {**CORS_HEADERS, "Access-Control-Allow-Methods": "POST, OPTIONS"}
JSON_HEADERS = {**CORS_HEADERS, "Content-Type": "application/json"}

_logging_configured = False


def configure_logging():
    """Replace loguru's default sink with one stderr sink at LOG_LEVEL."""
    global _logging_configured
    if _logging_configured:
        return
    logger.remove()
    logger.add(sys.stderr, level=LOG_LEVEL, format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | {message}")
    _logging_configured = True


def json_response(status_code: int, payload: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "body": json.dumps(payload),
    }


def read_payload(event: Dict[str, Any]) -> Dict[str, Any]:
    """Decode the JSON request body; an absent body reads as an empty object."""
    body = event.get("body") or ""
    try:
        if event.get("isBase64Encoded", False):
            body = base64.b64decode(body).decode("utf-8")
        payload = json.loads(body) if body else {}
    except ValueError as e:
        raise InputInvalid("Invalid JSON body") from e
    if not isinstance(payload, dict):
        raise InputInvalid("Invalid JSON body")
    return payload


async def details_response(company_url: str) -> Dict[str, Any]:
    try:
        details = await fetch_company_details(company_url)
    except SourceUnavailable as e:
        logger.warning(f"⚠️ Company details unavailable for {company_url}: {e.cause}")
        return json_response(500, {"error": "Failed to fetch company details"})
    if details is None:
        return json_response(404, {"error": "Company not found"})
    return json_response(200, details.to_dict())


async def handle_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Route a decoded request to the detail fetch or the full search."""
    try:
        if payload.get("fetchDetails") and payload.get("companyUrl"):
            return await details_response(str(payload["companyUrl"]))

        response = await search_companies(payload.get("query"))
        return json_response(200, response.to_dict())
    finally:
        # Each invocation runs on a fresh event loop; the session must not outlive it
        await HttpClient().close()


def handler(event, context):
    configure_logging()
    method = (event.get("httpMethod") or "").upper()

    if method == "OPTIONS":
        return {"statusCode": 204, "headers": dict(PREFLIGHT_HEADERS), "body": ""}

    if method != "POST":
        return json_response(405, {"error": "Method not allowed"})

    try:
        payload = read_payload(event)
        return asyncio.run(handle_payload(payload))
    except InputInvalid as e:
        return json_response(400, {"error": str(e)})
    except Exception as e:
        logger.exception("Company search failed")
        return json_response(500, {"error": f"Search failed: {e}"})
