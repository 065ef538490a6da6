import json
import logging

import pytest

from hbasectl.modules.hbase import ColumnFamilyDescriptor, TableDescriptor


def table(name, **families):
    """Build a TableDescriptor; each kwarg is a family name -> encoding (None for unset)."""
    cfs = []
    for cf_name, encoding in families.items():
        values = {} if encoding is None else {"DATA_BLOCK_ENCODING": encoding.encode("utf-8")}
        cfs.append(ColumnFamilyDescriptor(cf_name, values))
    return TableDescriptor(name, cfs)


class FakeAdmin:
    """Stands in for HBaseAdmin; records connection lifetime."""

    instances = []

    def __init__(self, tables=None, fail_on_list=None, **kwargs):
        self.tables = tables or []
        self.fail_on_list = fail_on_list
        self.kwargs = kwargs
        self.connected = False
        self.closed = False
        FakeAdmin.instances.append(self)

    def __enter__(self):
        self.connected = True
        return self

    def __exit__(self, exc_type, exc, tb):
        self.closed = True

    def list_table_descriptors(self):
        if self.fail_on_list:
            raise self.fail_on_list
        return list(self.tables)


@pytest.fixture
def fake_admin():
    """Return a factory making FakeAdmin instances over the given tables."""
    FakeAdmin.instances = []

    def make(tables=None, fail_on_list=None):
        def factory(**kwargs):
            return FakeAdmin(tables, fail_on_list, **kwargs)
        return factory

    return make


class FakeResponse:
    def __init__(self, status_code=200, payload=None, body=None):
        self.status_code = status_code
        if body is None:
            body = b"" if payload is None else json.dumps(payload).encode("utf-8")
        self.content = body
        self.text = body.decode("utf-8", errors="replace")

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        return json.loads(self.content)


class FakeSession:
    """Minimal requests.Session stand-in keyed by URL path."""

    def __init__(self, routes):
        self.routes = routes
        self.headers = {}
        self.verify = True
        self.auth = None
        self.requested = []
        self.closed = False

    def get(self, url, timeout=None):
        self.requested.append((url, timeout))
        path = url.split("://", 1)[-1].split("/", 1)[-1]
        result = self.routes.get("/" + path)
        if isinstance(result, Exception):
            raise result
        if result is None:
            return FakeResponse(404, body=b"Not found")
        return result

    def close(self):
        self.closed = True


@pytest.fixture
def rest_session():
    def make(routes):
        return FakeSession(routes)
    return make


@pytest.fixture
def warnings_log(caplog):
    caplog.set_level(logging.INFO, logger="hbasectl")
    return caplog
