import pytest

import main


@pytest.fixture
def client():
    main.app.config["TESTING"] = True
    main.SESSIONS.clear()
    with main.app.test_client() as c:
        yield c
    main.SESSIONS.clear()


def create(client, kind, sample=False):
    res = client.post("/api/session", json={"kind": kind, "sample": sample})
    assert res.status_code == 201
    return res.get_json()["session_id"]


def test_index_lists_kinds(client):
    data = client.get("/").get_json()
    assert "graph" in data["kinds"]
    assert "/api/session" in data["routes"]


def test_algorithms_filter(client):
    data = client.get("/api/algorithms?structure=stack").get_json()
    keys = {a["key"] for a in data["algorithms"]}
    assert keys == {"stack_push", "stack_pop", "stack_peek", "stack_clear"}
    everything = client.get("/api/algorithms").get_json()["algorithms"]
    assert len(everything) > len(keys)


def test_create_session_with_sample(client):
    res = client.post("/api/session", json={"kind": "bst", "sample": True})
    data = res.get_json()
    assert res.status_code == 201
    assert len(data["structure"]["nodes"]) == 7


def test_unknown_kind_is_400(client):
    res = client.post("/api/session", json={"kind": "skiplist"})
    assert res.status_code == 400
    assert res.get_json()["type"] == "InvalidInput"


def test_run_operation_and_playback(client):
    sid = create(client, "heap", sample=True)
    res = client.post(f"/api/session/{sid}/op", json={"op": "insert", "args": {"value": 5}})
    data = res.get_json()
    assert res.status_code == 200
    assert data["playback"]["current_index"] == -1
    assert data["console"][-1] == data["output"]
    total = data["playback"]["total_steps"]
    assert total == len(data["steps"])

    nxt = client.post(f"/api/session/{sid}/playback/next").get_json()
    assert nxt["current_index"] == 0
    assert nxt["current_step"]["description"] == "🌟 Inserting 5 into Min Heap"

    seek = client.post(f"/api/session/{sid}/playback/seek", json={"index": total - 1})
    assert seek.get_json()["state"] == "finished"
    assert client.post(f"/api/session/{sid}/playback/next").status_code == 400
    assert client.post(f"/api/session/{sid}/playback/seek", json={"index": total}).status_code == 400
    assert client.post(f"/api/session/{sid}/playback/warp").status_code == 400


def test_play_and_tick(client, clock, scheduler):
    sid = create(client, "stack")
    main.SESSIONS[sid].playback.scheduler = scheduler
    client.post(f"/api/session/{sid}/op", json={"op": "push", "args": {"value": 1}})
    assert client.post(f"/api/session/{sid}/playback/play").get_json()["state"] == "playing"
    clock.advance(10)
    data = client.post(f"/api/session/{sid}/tick").get_json()
    assert data["fired"] == 3
    assert data["state"] == "finished"


def test_speed_action(client):
    sid = create(client, "graph")
    data = client.post(f"/api/session/{sid}/playback/speed", json={"speed": "fast"}).get_json()
    assert data["interval"] == 0.8
    bad = client.post(f"/api/session/{sid}/playback/speed", json={"speed": "warp"})
    assert bad.status_code == 400


def test_operation_errors(client):
    sid = create(client, "queue")
    res = client.post(f"/api/session/{sid}/op", json={"op": "dequeue"})
    assert res.status_code == 400
    assert res.get_json() == {"error": "Queue is empty!", "type": "EmptyStructure"}
    res = client.post(f"/api/session/{sid}/op", json={"op": "enqueue", "args": {"value": "abc"}})
    assert res.get_json()["type"] == "InvalidInput"
    res = client.post(f"/api/session/{sid}/op", json={"op": "teleport"})
    assert res.get_json()["type"] == "UnknownOperation"
    assert client.post(f"/api/session/{sid}/op", json={}).status_code == 400


def test_missing_session_is_404(client):
    assert client.get("/api/session/nope").status_code == 404
    assert client.post("/api/session/nope/tick").status_code == 404


def test_export_and_delete(client):
    sid = create(client, "trie", sample=True)
    client.post(f"/api/session/{sid}/op", json={"op": "starts_with", "args": {"prefix": "ca"}})
    export = client.get(f"/api/session/{sid}/export").get_json()
    assert export["algo_key"] == "trie_starts_with"
    assert export["metrics"]["total_steps"] == len(export["steps"])
    assert client.delete(f"/api/session/{sid}").get_json() == {"deleted": sid}
    assert client.get(f"/api/session/{sid}").status_code == 404


def test_args_may_not_redefine_op(client):
    sid = create(client, "stack")
    res = client.post(f"/api/session/{sid}/op", json={"op": "push", "args": {"value": 1, "op": "x"}})
    assert res.status_code == 400
    assert res.get_json()["type"] == "InvalidInput"
    assert main.SESSIONS[sid].store.values() == []


def test_add_node_with_numeric_label(client):
    sid = create(client, "graph")
    res = client.post(f"/api/session/{sid}/op",
                      json={"op": "add_node", "args": {"value": "A", "label": 5}})
    assert res.status_code == 200
    assert res.get_json()["structure"]["nodes"][0]["label"] == "5"
    bad = client.post(f"/api/session/{sid}/op",
                      json={"op": "add_node", "args": {"value": "B", "label": {"x": 1}}})
    assert bad.status_code == 400


def test_algorithms_for_hash_kinds(client):
    for kind in ("hashset", "hashtable"):
        data = client.get(f"/api/algorithms?structure={kind}").get_json()
        assert {a["key"] for a in data["algorithms"]} == {"hash_add", "hash_remove", "hash_lookup"}
