"""
HBase REST gateway client for cluster administration.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from hbasectl.config import Config

JSON_HEADERS = {"Accept": "application/json"}


# Custom exceptions
class HBaseError(Exception):
    """Base exception for HBase client errors."""
    pass

class HBaseAuthenticationError(HBaseError):
    """Exception raised for authentication errors."""
    pass

class HBaseConnectionError(HBaseError):
    """Exception raised for connection errors."""
    pass

class HBaseObjectNotFoundError(HBaseError):
    """Exception raised when a requested object is not found."""
    pass


@dataclass
class ColumnFamilyDescriptor:
    """Schema of one column family."""
    name: str
    values: Dict[str, bytes] = field(default_factory=dict)

    def get_value(self, key: str) -> Optional[bytes]:
        """Return the raw attribute value for key, or None if unset."""
        return self.values.get(key)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "ColumnFamilyDescriptor":
        values = {
            k: str(v).encode("utf-8")
            for k, v in data.items()
            if k != "name" and v is not None
        }
        return cls(name=data["name"], values=values)


@dataclass
class TableDescriptor:
    """Schema of one table and its column families."""
    name: str
    column_families: List[ColumnFamilyDescriptor] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "TableDescriptor":
        families = [ColumnFamilyDescriptor.from_json(cf) for cf in data.get("ColumnSchema") or []]
        return cls(name=data["name"], column_families=families)


class HBaseAdmin:
    """Administrative handle on a cluster, reached through the REST gateway.

    Use as a context manager; the HTTP session is released on exit::

        with HBaseAdmin("http://rest.example.com:8080") as admin:
            for td in admin.list_table_descriptors():
                ...
    """

    def __init__(
        self,
        url: Optional[str] = None,
        user: Optional[str] = None,
        password: Optional[str] = None,
        timeout: Optional[float] = None,
        verify: Optional[bool] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the admin client.

        Args:
            url: REST gateway base URL, defaults to Config.HBASE_REST_URL
            user: Basic auth user, defaults to Config.HBASE_REST_USER
            password: Basic auth password, defaults to Config.HBASE_REST_PASSWORD
            timeout: Per-request timeout in seconds, defaults to Config.API_TIMEOUT
            verify: Verify TLS certificates, defaults to Config.VERIFY_SSL
            session: Pre-built session, mostly for tests
        """
        self.url = (url or Config.HBASE_REST_URL).rstrip('/')
        self.timeout = timeout if timeout is not None else Config.API_TIMEOUT
        self._session = session
        self._user = user if user is not None else Config.HBASE_REST_USER
        self._password = password if password is not None else Config.HBASE_REST_PASSWORD
        self._verify = verify if verify is not None else Config.VERIFY_SSL
        self.logger = logging.getLogger(f"{__name__}.HBaseAdmin")

    def __enter__(self) -> "HBaseAdmin":
        try:
            self.connect()
        except Exception:
            self.close()
            raise
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def connect(self) -> None:
        """Open the session and probe the gateway."""
        if self._session is None:
            self._session = requests.Session()
        self._session.headers.update(JSON_HEADERS)
        self._session.verify = self._verify
        if self._user:
            self._session.auth = (self._user, self._password)
        version = self._get("/version/cluster")
        self.logger.debug(f"Connected to {self.url} (cluster version: {version})")

    def close(self) -> None:
        """Release the HTTP session. Safe to call more than once."""
        if self._session is not None:
            self._session.close()
            self._session = None
            self.logger.debug(f"Closed connection to {self.url}")

    def list_table_names(self) -> List[str]:
        """Return the names of all tables in the cluster."""
        data = self._get("/")
        if not data:
            return []
        return [t["name"] for t in data.get("table") or []]

    def get_table_descriptor(self, name: str) -> TableDescriptor:
        """Fetch the schema of a single table."""
        data = self._get(f"/{quote(name, safe='')}/schema")
        return TableDescriptor.from_json(data)

    def list_table_descriptors(self) -> List[TableDescriptor]:
        """Fetch the schema of every table in the cluster."""
        names = self.list_table_names()
        self.logger.debug(f"Found {len(names)} tables")
        return [self.get_table_descriptor(name) for name in names]

    def _get(self, path: str) -> Any:
        if self._session is None:
            raise HBaseConnectionError("Not connected; call connect() first")

        url = f"{self.url}{path}"
        self.logger.debug(f"GET {url}")
        try:
            response = self._session.get(url, timeout=self.timeout)
        except (requests.ConnectionError, requests.Timeout) as e:
            raise HBaseConnectionError(f"Cannot reach HBase REST gateway at {self.url}: {e}") from e
        except requests.RequestException as e:
            raise HBaseError(f"Request to {url} failed: {e}") from e

        if response.status_code in (401, 403):
            raise HBaseAuthenticationError(f"Access denied by {self.url} (HTTP {response.status_code})")
        if response.status_code == 404:
            raise HBaseObjectNotFoundError(f"Not found: {path}")
        if not response.ok:
            raise HBaseError(f"GET {path} failed with HTTP {response.status_code}: {response.text}")

        # Empty clusters answer the table listing with no body
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise HBaseError(f"Invalid JSON from {url}: {e}") from e
