from typing import List, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from errors import HttpError, NetworkError, ParseError
from schema import Project, parse_projects

# Characters encodeURIComponent leaves alone
URI_COMPONENT_SAFE = "-_.!~*'()"


def build_projects_url(endpoint: str, username: str) -> str:
    return f"{endpoint}?username={quote(username, safe=URI_COMPONENT_SAFE)}"


def fetch_projects(
    username: str,
    endpoint: str,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> List[Project]:
    try:
        url = build_projects_url(endpoint, username)
    except UnicodeEncodeError as e:
        raise NetworkError(f"Cannot build a request URL for username {username!r}") from e

    get = session.get if session is not None else requests.get

    try:
        r = get(url, timeout=timeout)
    except requests.RequestException as e:
        raise NetworkError(f"Request to {url} failed: {e}") from e

    if not 200 <= r.status_code < 300:
        raise HttpError(r.status_code)

    try:
        payload = r.json()
    except ValueError as e:
        raise ParseError(f"Response from {url} is not valid JSON") from e

    try:
        return parse_projects(payload)
    except ValidationError as e:
        raise ParseError(f"Response from {url} is not a list of projects: {e}") from e
