from ..structures import RequestResult
from ..exceptions import RobloxAPIError, RobloxDown, RobloxNotFound, RobloxUnauthorized
from ..constants import ALLOWED_METHODS, ERROR_BODY_LOG_LIMIT
from requests.utils import requote_uri
import requests
import logging


log = logging.getLogger(__name__)



def parse_json(response):
    """Decodes the response body, or returns None when it isn't JSON"""

    try:
        return response.json()
    except ValueError:
        return None


def raise_for_result(result, message=None):
    """Raises the exception matching a non-200 RequestResult."""

    status = result.status

    if status == 200:
        return

    message = message or f"Roblox responded with status {status}"

    if status == 503:
        raise RobloxDown(message, status=status)
    elif status == 404:
        raise RobloxNotFound(message, status=status)
    elif status in (401, 403):
        raise RobloxUnauthorized(message, status=status)

    raise RobloxAPIError(message, status=status)


def fetch(url, method="GET", headers=None, body=None, raise_on_failure=False):
    """
    Makes one HTTP request and returns a RequestResult.

    The body of the response is decoded as JSON whatever the status code is;
    if that fails the result carries body=None. A falsy `body` sends no payload.

    Transport failures always raise: RobloxDown for connection errors and
    timeouts, RobloxAPIError for anything else requests complains about.
    With raise_on_failure, statuses >= 400 raise through raise_for_result.
    """

    headers = headers or {}
    method  = method.upper()

    if method not in ALLOWED_METHODS:
        raise ValueError(f"Unsupported HTTP method: {method}")

    url = requote_uri(url)

    log.debug("Making %s request to %s", method, url)

    try:
        response = requests.request(method, url, headers=headers, json=body or None)
    except (requests.ConnectionError, requests.Timeout) as e:
        log.warning("%s %s could not reach Roblox: %s", method, url, e)
        raise RobloxDown(f"{method} {url} could not reach Roblox") from e
    except requests.RequestException as e:
        log.warning("%s %s failed: %s", method, url, e)
        raise RobloxAPIError(f"{method} {url} failed: {e}") from e

    result = RequestResult(response.status_code, parse_json(response))

    if result.status >= 400:
        log.warning("%s %s returned %s: %s", method, url, result.status, response.text[:ERROR_BODY_LOG_LIMIT])

        if raise_on_failure:
            raise_for_result(result, f"{method} {url} returned {result.status}")

    return result
