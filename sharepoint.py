import sys

import requests
from requests.auth import AuthBase

REQUEST_TIMEOUT = 60


class BearerAuth(AuthBase):
    """Stamp the bearer token on every request sent through the session."""

    def __init__(self, access_token: str):
        self.access_token = access_token

    def __call__(self, r):
        r.headers["Authorization"] = f"Bearer {self.access_token}"
        return r


def get_client_context(site_url: str, access_token: str) -> requests.Session:
    session = requests.Session()
    session.auth = BearerAuth(access_token)
    session.headers["Accept"] = "application/json;odata=nometadata"
    print(f"[sharepoint] context bound to {site_url}", file=sys.stderr)
    return session


def get_web_title(session: requests.Session, site_url: str) -> str:
    url = f"{site_url}/_api/web"
    print(f"[sharepoint] GET {url}", file=sys.stderr)
    r = session.get(url, params={"$select": "Title"}, timeout=REQUEST_TIMEOUT)
    r.raise_for_status()
    return r.json()["Title"]
