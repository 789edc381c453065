"""
Remote NAV fetchers for Indian mutual funds and NPS schemes.

Both return a date-ascending list of Price. Any HTTP, JSON or shape problem
raises PriceFetchError; there is no partial data mode.
"""

from __future__ import annotations

import datetime
import os
from typing import List

import requests
from loguru import logger

from core.exceptions import PriceFetchError

from .series import Price

MFAPI_BASE_URL = "https://api.mfapi.in"
NPS_BASE_URL = "https://nps.purifiedbytes.com"
REQUEST_TIMEOUT = 20.0


def mutualfund_base_url() -> str:
    return os.getenv("MFAPI_BASE_URL") or MFAPI_BASE_URL


def nps_base_url() -> str:
    return os.getenv("NPS_BASE_URL") or NPS_BASE_URL


def _get_json(url: str, commodity: str) -> dict:
    logger.info("Fetching prices for {} from {}", commodity, url)
    try:
        response = requests.get(url, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
        return response.json()
    except requests.RequestException as exc:
        raise PriceFetchError(commodity, str(exc)) from exc
    except ValueError as exc:
        raise PriceFetchError(commodity, f"invalid JSON: {exc}") from exc


def fetch_mutualfund_nav(scheme_code: str, commodity: str) -> List[Price]:
    """
    mfapi.in payload:
        {"meta": {...}, "data": [{"date": "02-01-2024", "nav": "123.4560"}, ...]}
    newest first.
    """
    payload = _get_json(f"{mutualfund_base_url()}/mf/{scheme_code}", commodity)
    try:
        prices = [
            Price(
                date=datetime.datetime.strptime(row["date"], "%d-%m-%Y").date(),
                value=float(row["nav"]),
            )
            for row in payload["data"]
        ]
    except (KeyError, TypeError, ValueError) as exc:
        raise PriceFetchError(commodity, f"unexpected payload: {exc}") from exc

    if not prices:
        raise PriceFetchError(commodity, f"no NAV data for scheme {scheme_code}")
    return sorted(prices)


def fetch_nps_nav(scheme_code: str, commodity: str) -> List[Price]:
    """
    NPS payload:
        {"data": [["2024-01-02", 45.1234], ...]}
    """
    payload = _get_json(f"{nps_base_url()}/api/schemes/{scheme_code}/nav.json", commodity)
    try:
        prices = [
            Price(date=datetime.date.fromisoformat(d), value=float(v))
            for d, v in payload["data"]
        ]
    except (KeyError, TypeError, ValueError) as exc:
        raise PriceFetchError(commodity, f"unexpected payload: {exc}") from exc

    if not prices:
        raise PriceFetchError(commodity, f"no NAV data for scheme {scheme_code}")
    return sorted(prices)
