from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from rest_framework.test import APIClient

from currentlog.store import LogStore

WIB = ZoneInfo("Asia/Jakarta")


@pytest.fixture
def api():
    return APIClient()


@pytest.fixture
def now():
    return datetime(2025, 3, 14, 9, 26, 53, 589000, tzinfo=WIB)


class CountingStore(LogStore):
    """실제 LogStore 에 호출 횟수만 센다."""

    def __init__(self):
        super().__init__()
        self.calls = []

    def bulk_insert(self, partition, readings):
        self.calls.append(("bulk_insert", partition, len(readings)))
        return super().bulk_insert(partition, readings)

    def query(self, partition, **kw):
        self.calls.append(("query", partition))
        return super().query(partition, **kw)

    def upsert_indicator(self, *a, **kw):
        self.calls.append(("upsert_indicator",) + a)
        return super().upsert_indicator(*a, **kw)

    def indicators(self, indicator_id=None):
        self.calls.append(("indicators", indicator_id))
        return super().indicators(indicator_id)


@pytest.fixture
def counting_store():
    return CountingStore()
