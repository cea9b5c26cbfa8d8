from datetime import timedelta

import pytest

from currentlog import views_api
from currentlog.models import Indicator

pytestmark = pytest.mark.django_db


def _post(api, body):
    return api.post("/api/indicator/", body, format="json")


def test_upsert_overwrites(api, monkeypatch, now):
    monkeypatch.setattr(views_api, "capture_instant", lambda tz: now)
    assert _post(api, [{"indicator_id": 1, "value": 10}]).status_code == 200

    second = now + timedelta(seconds=30)
    monkeypatch.setattr(views_api, "capture_instant", lambda tz: second)
    resp = _post(api, [{"indicator_id": 1, "value": 20}])

    assert resp.status_code == 200
    assert Indicator.objects.count() == 1
    ind = Indicator.objects.get()
    assert ind.value == 20
    assert ind.updated_at == second
    assert resp.data["items"][0]["updated_at"] == second.isoformat()


def test_upsert_keeps_motor_when_omitted(api):
    _post(api, [{"indicator_id": 3, "value": 1.0, "motor": "pump-A"}])
    _post(api, [{"indicator_id": 3, "value": 2.0}])

    ind = Indicator.objects.get(indicator_id=3)
    assert ind.motor == "pump-A"
    assert ind.value == 2.0

    _post(api, [{"indicator_id": 3, "value": 2.5, "motor": "pump-B"}])
    assert Indicator.objects.get(indicator_id=3).motor == "pump-B"


def test_entries_share_updated_at(api, monkeypatch, now):
    monkeypatch.setattr(views_api, "capture_instant", lambda tz: now)
    resp = _post(api, [
        {"indicator_id": 1, "value": 1},
        {"indicator_id": 2, "value": 2, "motor": "fan"},
    ])

    assert [x["indicator_id"] for x in resp.data["items"]] == [1, 2]
    assert {x["updated_at"] for x in resp.data["items"]} == {now.isoformat()}
    assert resp.data["items"][1]["motor"] == "fan"
    assert resp.data["items"][0]["motor"] is None


def test_upsert_rejects_bad_body(api):
    assert _post(api, {"indicator_id": 1, "value": 1}).status_code == 400
    assert _post(api, [{"indicator_id": "x", "value": 1}]).status_code == 400
    assert _post(api, [{"indicator_id": 1}]).status_code == 400
    assert Indicator.objects.count() == 0


def test_list_and_detail(api):
    _post(api, [{"indicator_id": 5, "value": 50}, {"indicator_id": 4, "value": 40}])

    resp = api.get("/api/indicator/")
    assert [x["indicator_id"] for x in resp.data["items"]] == [4, 5]

    resp = api.get("/api/indicator/5/")
    assert resp.status_code == 200
    assert resp.data["value"] == 50

    assert api.get("/api/indicator/99/").status_code == 404
    assert api.get("/api/indicator/abc/").status_code == 400


def test_indicator_state_in_log_listing(api):
    _post(api, [{"indicator_id": 7, "value": 410, "motor": "m7"}, {"indicator_id": 8, "value": 1}])

    resp = api.get("/api/log1/indicator/7/")
    assert [x["indicator_id"] for x in resp.data["status"]] == [7]
    assert resp.data["status"][0]["motor"] == "m7"

    resp = api.get("/api/log1/")
    assert [x["indicator_id"] for x in resp.data["status"]] == [7, 8]


def test_upsert_rejects_out_of_range_id(api):
    assert _post(api, [{"indicator_id": 10**20, "value": 1}]).status_code == 400
    assert api.get(f"/api/indicator/{10**20}/").status_code == 400
    assert Indicator.objects.count() == 0
