"""
qtcmd.qiita - Qiita API v2 client

Handles authenticated requests to the Qiita REST API for listing, creating
and updating items.
"""

import logging
from typing import Any, Dict, List, Optional

import requests
import urllib3
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from . import __version__
from .config import Settings


class QiitaClient:
    """Client for the Qiita items API"""

    def __init__(self, token: str, user: str, settings: Optional[Settings] = None):
        self.token = token
        self.user = user
        self.settings = settings or Settings()
        self.base_url = self.settings.base_url
        self.session: Optional[requests.Session] = None

        self.init_session()

    def init_session(self):
        """Initialize session with auth headers and retry policy"""
        if self.session:
            self.session.close()

        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {self.token}",
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": f"qtcmd/{__version__}",
            }
        )

        # Only idempotent requests are retried, a repeated POST would duplicate the item
        retry_strategy = Retry(
            total=self.settings.max_retries,
            backoff_factor=0.5,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=frozenset(["GET"]),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

        if not self.settings.verify_ssl:
            self.session.verify = False
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
            logging.warning("SSL certificate verification disabled")

        logging.debug("Qiita session initialized for %s", self.base_url)

    def close(self):
        if self.session:
            self.session.close()
            self.session = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        logging.info("%s %s", method, url)

        response = self.session.request(method, url, json=payload, timeout=self.settings.timeout)
        logging.debug("Qiita returned status code: %d", response.status_code)
        response.raise_for_status()
        return response.json()

    @staticmethod
    def build_item(
        title: str,
        tags: List[Dict[str, Any]],
        body: str,
        is_private: bool = False,
        gist: bool = False,
        tweet: bool = False,
    ) -> Dict[str, Any]:
        """Build the JSON body shared by item creation and update"""
        return {
            "body": body,
            "coediting": False,
            "gist": gist,
            "private": is_private,
            "tags": tags,
            "title": title,
            "tweet": tweet,
        }

    def get_items(self) -> List[Dict[str, Any]]:
        """Fetch the first page of the user's items"""
        # TODO: follow the Link header to fetch every page
        return self._request("GET", f"/users/{self.user}/items")

    def post_item(
        self,
        title: str,
        tags: List[Dict[str, Any]],
        body: str,
        is_private: bool = False,
        gist: bool = False,
        tweet: bool = False,
    ) -> Dict[str, Any]:
        """Create a new item"""
        item = self.build_item(title, tags, body, is_private, gist, tweet)
        return self._request("POST", "/items", item)

    def patch_item(
        self,
        item_id: str,
        title: str,
        tags: List[Dict[str, Any]],
        body: str,
        is_private: bool = False,
        gist: bool = False,
        tweet: bool = False,
    ) -> Dict[str, Any]:
        """Update an existing item"""
        item = self.build_item(title, tags, body, is_private, gist, tweet)
        return self._request("PATCH", f"/items/{item_id}", item)
