"""
Testing API via TestClient
- Trick: temporarily replace draw_word so the secret is predictable.
- Tool: pytest's "monkeypatch" fixture does that for just one test at a time.
"""

import wordle.main as app_main
from wordle.word_source import EmptyWordSource


def fix_secret(monkeypatch, secret="APPLE"):
    # Patch the bound symbol that main.py actually uses
    monkeypatch.setattr(app_main, "draw_word", lambda path, use_remote=False: secret)


def test_start_and_win_with_fixed_secret(client, monkeypatch):
    """
    Flow:
    1) Start a game; secret is APPLE due to patch.
    2) Wrong-length guess -> 400, no attempt used.
    3) Valid-length wrong guess -> 200 + per-letter feedback.
    4) Winning guess -> 'won' and secret revealed.
    """
    fix_secret(monkeypatch)

    response = client.post("/games")
    assert response.status_code == 200
    new_game = response.json()
    assert new_game["word_length"] == 5
    assert new_game["attempts_left"] == 6
    assert new_game["status"] == "in_progress"
    assert "secret" not in new_game
    game_id = new_game["game_id"]

    # Wrong length -> 400
    response = client.post(f"/games/{game_id}/guess", json={"guess": "APP"})
    assert response.status_code == 400
    assert "5 characters" in response.json()["detail"]

    # Valid-length but wrong guess
    response = client.post(f"/games/{game_id}/guess", json={"guess": "PLEAS"})
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "in_progress"
    assert body["attempts_left"] == 5
    assert body["secret"] is None
    statuses = [letter["status"] for letter in body["feedback"]["letters"]]
    assert statuses == ["present", "present", "present", "present", "absent"]
    assert [letter["letter"] for letter in body["feedback"]["letters"]] == list("PLEAS")

    # Win
    response = client.post(f"/games/{game_id}/guess", json={"guess": "APPLE"})
    assert response.status_code == 200
    final = response.json()
    assert final["status"] == "won"
    assert final["secret"] == "APPLE"
    assert "No more guesses" in final["note"]


def test_state_hides_secret_until_finished(client, monkeypatch):
    fix_secret(monkeypatch, "ABC")
    client.put("/settings/max-attempts", json={"max_attempts": 1})

    game_id = client.post("/games").json()["game_id"]

    state = client.get(f"/games/{game_id}").json()
    assert state["secret"] is None
    assert state["max_attempts"] == 1
    assert state["history"] == []

    client.post(f"/games/{game_id}/guess", json={"guess": "CBA"})

    state = client.get(f"/games/{game_id}").json()
    assert state["status"] == "lost"
    assert state["secret"] == "ABC"
    assert len(state["history"]) == 1


def test_cannot_guess_after_game_finished(client, monkeypatch):
    fix_secret(monkeypatch)

    game_id = client.post("/games").json()["game_id"]

    first = client.post(f"/games/{game_id}/guess", json={"guess": "APPLE"}).json()
    assert first["status"] == "won"

    # Try again after finished: ignored, no feedback
    second = client.post(f"/games/{game_id}/guess", json={"guess": "CRANE"}).json()
    assert second["status"] == "won"
    assert second["attempts_left"] == first["attempts_left"]
    assert second["feedback"] is None
    assert "No more guesses" in second["note"]


def test_loss_after_max_attempts(client, monkeypatch):
    fix_secret(monkeypatch)
    game_id = client.post("/games").json()["game_id"]

    for n in range(6):
        r = client.post(f"/games/{game_id}/guess", json={"guess": "CRANE"})
        assert r.status_code == 200

    body = r.json()
    assert body["status"] == "lost"
    assert body["attempts_left"] == 0
    assert body["secret"] == "APPLE"


def test_unknown_game(client):
    assert client.get("/games/nope").status_code == 404
    assert client.post("/games/nope/guess", json={"guess": "APPLE"}).status_code == 404


def test_word_source_failure_is_503(client, monkeypatch):
    def empty(path, use_remote=False):
        raise EmptyWordSource("Word list is empty.")

    monkeypatch.setattr(app_main, "draw_word", empty)

    response = client.post("/games")
    assert response.status_code == 503


def test_settings_change_applies_to_new_games_only(client, monkeypatch):
    fix_secret(monkeypatch)

    assert client.get("/settings").json() == {"max_attempts": 6}
    old_game = client.post("/games").json()["game_id"]

    response = client.put("/settings/max-attempts", json={"max_attempts": 3})
    assert response.status_code == 200
    assert response.json() == {"max_attempts": 3}

    new_game = client.post("/games").json()
    assert new_game["attempts_left"] == 3
    assert client.get(f"/games/{old_game}").json()["max_attempts"] == 6


def test_invalid_settings_rejected(client):
    assert client.put("/settings/max-attempts", json={"max_attempts": 0}).status_code == 400
    assert client.put("/settings/max-attempts", json={"max_attempts": "lots"}).status_code == 422
    assert client.get("/settings").json() == {"max_attempts": 6}
