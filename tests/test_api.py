import threading
import time

from fastapi.testclient import TestClient

from cellar import session as session_module
from cellar.main import create_app


TWO_WINES = (
    "WINE NAME,WINE COLOR,VARIETAL,FOOD PAIRING\n"
    '"Test Red","Red","Malbec","steak"\n'
    '"Test White","White","Chardonnay","fish"\n'
)


def write_csv(tmp_path, text):
    path = tmp_path / "wines.csv"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_pairing_end_to_end(tmp_path):
    with TestClient(create_app(source=write_csv(tmp_path, TWO_WINES))) as client:
        r = client.put("/api/filters", json={"selected_pairing": "steak"})
    assert r.status_code == 200

    view = r.json()["view"]
    assert view["white"] == {"groups": {}, "varietals": [], "expanded": {}}
    assert view["red"]["varietals"] == ["Malbec"]
    assert [w["name"] for w in view["red"]["groups"]["Malbec"]] == ["Test Red"]
    assert r.json()["expanded"] == {"red:Malbec": True}
    assert view["red"]["expanded"] == {"Malbec": True}


def test_toggle_group(tmp_path):
    with TestClient(create_app(source=write_csv(tmp_path, TWO_WINES))) as client:
        r = client.post("/api/groups/white/Chardonnay/toggle")
        assert r.status_code == 200
        assert r.json()["expanded"] == {"white:Chardonnay": True}

        r = client.post("/api/groups/white/Chardonnay/toggle")
        assert r.json()["expanded"] == {"white:Chardonnay": False}

        r = client.post("/api/groups/rose/Chardonnay/toggle")
        assert r.status_code == 422


def test_bad_category_rejected(tmp_path):
    with TestClient(create_app(source=write_csv(tmp_path, TWO_WINES))) as client:
        r = client.put("/api/filters", json={"active_category": "sparkling"})
    assert r.status_code == 422


def test_pairings_dropdown():
    with TestClient(create_app()) as client:
        r = client.get("/api/pairings", params={"q": "stea"})
    assert r.status_code == 200
    assert r.json() == {"pairings": ["Steak"]}


def test_load_failure_blocks_view(tmp_path):
    missing = str(tmp_path / "missing.csv")
    with TestClient(create_app(source=missing)) as client:
        assert client.get("/health").status_code == 200

        r = client.get("/api/view")
        assert r.status_code == 503
        assert "Could not read wine list" in r.json()["detail"]

        r = client.put("/api/filters", json={"search_term": "x"})
        assert r.status_code == 503


def test_parse_failure_blocks_view(tmp_path):
    source = write_csv(tmp_path, 'WINE NAME,WINE COLOR\n"Broken,Red\n')
    with TestClient(create_app(source=source)) as client:
        r = client.get("/api/view")
    assert r.status_code == 503
    assert "Malformed wine list" in r.json()["detail"]


def test_toggle_during_filter_update_is_kept(tmp_path, monkeypatch):
    build = session_module.build_view_model

    def slow_build(*args, **kwargs):
        time.sleep(0.3)
        return build(*args, **kwargs)

    with TestClient(create_app(source=write_csv(tmp_path, TWO_WINES))) as client:
        monkeypatch.setattr(session_module, "build_view_model", slow_build)

        search = threading.Thread(
            target=client.put, args=("/api/filters",), kwargs={"json": {"search_term": "malbec"}}
        )
        search.start()
        time.sleep(0.1)
        r = client.post("/api/groups/white/Chardonnay/toggle")
        search.join()
        assert r.status_code == 200

        expanded = client.get("/api/view").json()["expanded"]
    assert expanded == {"red:Malbec": True, "white:Chardonnay": True}
