from room.core.observability.metrics import snapshot_named


def test_list_scenarios(client):
    r = client.get("/api/v1/scenarios")
    assert r.status_code == 200, r.text
    body = r.json()
    names = [s["name"] for s in body["scenarios"]]
    assert "door" in names
    assert body["meta"]["count"] == len(names)


def test_run_scenario(client):
    r = client.post("/api/v1/scenarios/door/run")
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["name"] == "door"
    assert body["ok"] is True
    assert snapshot_named().get("scenarios_passed") == 1


def test_run_unknown_scenario(client):
    r = client.post("/api/v1/scenarios/does-not-exist/run")
    assert r.status_code == 404


def test_broken_scenario_dir_is_422(client, monkeypatch, tmp_path):
    (tmp_path / "broken.yaml").write_text("objects: [nobody]\n", encoding="utf-8")
    monkeypatch.setenv("ROOM_SCENARIO_DIR", str(tmp_path))
    r = client.get("/api/v1/scenarios")
    assert r.status_code == 422
