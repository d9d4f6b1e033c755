"""
Cliente para TheSportsDB (API pública v1).
Un solo intento por request, con timeout; los fallos de red, HTTP y JSON se
convierten en APIClientError para que el llamador decida el fallback.
"""

import logging
from typing import Dict, Optional, Any

import requests

from src.config.settings import Settings

logger = logging.getLogger(__name__)


class APIClientError(Exception):
    pass


def _build_headers(settings: Settings) -> Dict[str, str]:
    return {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }


def _do_get(settings: Settings, url: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    logger.debug("GET %s params=%s", url, params)
    try:
        resp = requests.get(url, headers=_build_headers(settings), params=params or {}, timeout=settings.timeout)
        resp.raise_for_status()
    except requests.exceptions.HTTPError as e:
        status = getattr(e.response, "status_code", None)
        logger.error("HTTP error %s for %s: %s", status, url, e)
        raise APIClientError(f"Request failed {status}: {e}") from e
    except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
        logger.error("Connection/Timeout for %s: %s", url, e)
        raise APIClientError(f"Failed to GET {url}: {e}") from e
    except requests.exceptions.RequestException as e:
        logger.error("Request error for %s: %s", url, e)
        raise APIClientError(f"Failed to GET {url}: {e}") from e
    try:
        return resp.json()
    except ValueError as e:
        raise APIClientError(f"Non-JSON body from {url}") from e


def get_events_day(settings: Settings, date: str, league: Optional[str] = None) -> Dict[str, Any]:
    """
    Eventos de un día, opcionalmente de una sola liga.

    Args:
        settings: configuración (base URL, key, timeout)
        date: 'YYYY-MM-DD'
        league: nombre exacto de liga en TheSportsDB, p.ej. 'Italian Serie A'

    Returns:
        JSON decodificado; normalmente {"events": [...]} o {"events": null}.
    Raises:
        APIClientError: fallo de transporte, status no 2xx o cuerpo no JSON.
    """
    url = f"{settings.base_url.rstrip('/')}/{settings.api_key}/eventsday.php"
    params: Dict[str, Any] = {"d": date}
    if league is not None:
        params["l"] = league
    return _do_get(settings, url, params=params)
