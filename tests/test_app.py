import pytest

from app.app import create_app


@pytest.fixture
def client():
    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_codes(client):
    res = client.post("/api/codes", json={"text": "abracadabra"})
    assert res.status_code == 200
    data = res.get_json()
    assert data["codes"] == {"'a'": "0", "'b'": "110", "'c'": "1110", "'d'": "1111", "'r'": "10"}
    assert data["bits"] == 23
    assert data["bytes"] == 3
    assert data["table"][0]["freq"] == 5


def test_grid(client):
    res = client.post("/api/grid", json={"text": "ab AB"})
    assert res.get_json()["lines"] == ["#-B ", "|   ", "A   ", "    "]


def test_too_few_symbols_is_bad_request(client):
    res = client.post("/api/codes", json={"text": "zzz"})
    assert res.status_code == 400
    assert "error" in res.get_json()


def test_missing_text_is_bad_request(client):
    res = client.post("/api/grid", json={})
    assert res.status_code == 400


def test_plot(client):
    res = client.post("/api/plot", json={"text": "hello world"})
    assert res.status_code == 200
    assert res.mimetype == "image/png"
    assert res.data[:4] == b"\x89PNG"


def test_letters_only_must_be_a_bool(client):
    res = client.post("/api/codes", json={"text": "ab12", "letters_only": "false"})
    assert res.status_code == 400

    res = client.post("/api/codes", json={"text": "ab12", "letters_only": False})
    assert res.status_code == 200
    assert set(res.get_json()["codes"]) == {"'1'", "'2'", "'a'", "'b'"}


def test_requests_do_not_log_debug_by_default(monkeypatch, capsys):
    monkeypatch.delenv("HUFFARRAY_LOG_LEVEL", raising=False)
    app = create_app()
    app.config["TESTING"] = True
    res = app.test_client().post("/api/codes", json={"text": "abracadabra"})
    assert res.status_code == 200
    err = capsys.readouterr().err
    assert "Árbol construido" not in err
    assert "Liberados" not in err
