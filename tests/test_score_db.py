"""Tests for score persistence and the best-effort score logger."""

import logging
import sqlite3
import threading

import pytest
from neon_flap.score_db import ScoreDatabase, ScoreLogger


@pytest.fixture
def db(tmp_path):
    database = ScoreDatabase(str(tmp_path / "scores.db"))
    yield database
    database.close()


def test_authenticate_registers_new_user(db):
    user_id = db.authenticate("ada", "pw")
    assert user_id is not None
    assert db.get_user("ada") == (user_id, "ada", "pw")


def test_authenticate_existing_user(db):
    user_id = db.authenticate("ada", "pw")
    assert db.authenticate("ada", "pw") == user_id


def test_authenticate_rejects_wrong_password(db):
    db.authenticate("ada", "pw")
    assert db.authenticate("ada", "nope") is None


def test_add_user_duplicate_returns_none(db):
    assert db.add_user("ada", "pw") is not None
    assert db.add_user("ada", "other") is None


def test_score_history_and_best(db):
    user_id = db.authenticate("ada", "pw")
    assert db.best_score(user_id) == 0
    for score in (3, 11, 7):
        db.add_score(user_id, score)
    assert db.best_score(user_id) == 11

    rows = db.conn.execute("SELECT score, timestamp FROM Scores WHERE user_id=?", (user_id,)).fetchall()
    assert [r[0] for r in rows] == [3, 11, 7]
    assert all(r[1] for r in rows)


def test_leaderboard_orders_by_best(db):
    ada = db.authenticate("ada", "pw")
    bob = db.authenticate("bob", "pw")
    db.add_score(ada, 4)
    db.add_score(bob, 9)
    db.add_score(ada, 12)
    assert db.get_leaderboard() == [("ada", 12), ("bob", 9)]
    assert db.get_leaderboard(limit=1) == [("ada", 12)]


def test_logger_saves_score(db):
    user_id = db.authenticate("ada", "pw")
    score_logger = ScoreLogger(db, user_id)
    score_logger.save_score(8)
    assert db.best_score(user_id) == 8


def test_logger_without_user_does_nothing(db):
    ScoreLogger(db, None).save_score(8)
    assert db.conn.execute("SELECT COUNT(*) FROM Scores").fetchone() == (0,)


def test_logger_swallows_failures(db, caplog):
    user_id = db.authenticate("ada", "pw")
    db.close()
    score_logger = ScoreLogger(db, user_id)

    with caplog.at_level(logging.ERROR, logger="neon_flap.score_db"):
        score_logger.save_score(5)

    assert "Error saving score 5" in caplog.text


def test_logger_swallows_arbitrary_exceptions(monkeypatch, db):
    user_id = db.authenticate("ada", "pw")

    def broken(*args):
        raise sqlite3.OperationalError("disk I/O error")

    monkeypatch.setattr(db, "add_score", broken)
    ScoreLogger(db, user_id).save_score(5)


def test_submit_runs_in_background(db):
    user_id = db.authenticate("ada", "pw")
    score_logger = ScoreLogger(db, user_id)
    for score in (1, 2, 3):
        score_logger.submit(score)
    score_logger.join(timeout=5.0)
    assert db.best_score(user_id) == 3
    assert db.conn.execute("SELECT COUNT(*) FROM Scores").fetchone() == (3,)


def test_submit_swallows_thread_start_failure(monkeypatch, db, caplog):
    user_id = db.authenticate("ada", "pw")
    score_logger = ScoreLogger(db, user_id)

    def refuse(self):
        raise RuntimeError("can't start new thread")

    monkeypatch.setattr(threading.Thread, "start", refuse)
    with caplog.at_level(logging.ERROR, logger="neon_flap.score_db"):
        score_logger.submit(4)

    assert "Could not start save for score 4" in caplog.text
    score_logger.join(timeout=1.0)
    assert db.best_score(user_id) == 0
