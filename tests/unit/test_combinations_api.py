"""HTTP-level tests for used combinations and clear-all."""


def test_used_combinations_start_empty(client):
    r = client.get("/api/used-combinations")
    assert r.status_code == 200
    assert r.json() == {}


def test_merge_is_additive_and_overwrites(client):
    assert client.post("/api/used-combinations", json={"combinations": {"a": 1}}).json() == {"success": True}
    client.post("/api/used-combinations", json={"combinations": {"b": 2}})
    assert client.get("/api/used-combinations").json() == {"a": 1, "b": 2}

    client.post("/api/used-combinations", json={"combinations": {"a": 3}})
    assert client.get("/api/used-combinations").json() == {"a": 3, "b": 2}


def test_merge_without_combinations_is_a_no_op(client):
    client.post("/api/used-combinations", json={"combinations": {"a": [1, 2]}})
    r = client.post("/api/used-combinations", json={})
    assert r.status_code == 200
    assert client.get("/api/used-combinations").json() == {"a": [1, 2]}


def test_merge_does_not_touch_missions(client):
    mission = client.post("/api/missions", json={"name": "scout"}).json()["mission"]
    client.post("/api/used-combinations", json={"combinations": {"x": True}})
    assert client.get("/api/missions").json() == [mission]


def test_clear_all_empties_both_resources(client):
    client.post("/api/missions", json={"name": "scout"})
    client.post("/api/missions", json={"name": "ranger"})
    client.post("/api/used-combinations", json={"combinations": {"a": 1}})

    r = client.delete("/api/clear-all")
    assert r.status_code == 200
    assert r.json() == {"success": True}

    assert client.get("/api/missions").json() == []
    assert client.get("/api/used-combinations").json() == {}

    assert client.delete("/api/clear-all").json() == {"success": True}
    assert client.get("/api/missions").json() == []
