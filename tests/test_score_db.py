import pytest

from flappy.score_db import ScoreStore


@pytest.fixture
def db_file(tmp_path):
    return str(tmp_path / "scores.db")


def test_new_store_starts_at_zero(db_file):
    store = ScoreStore(db_file)
    assert store.load() == 0
    store.close()


def test_save_keeps_the_maximum(db_file):
    store = ScoreStore(db_file)
    store.save(5)
    assert store.load() == 5
    store.save(3)
    assert store.load() == 5
    store.close()


def test_best_survives_reopen(db_file):
    store = ScoreStore(db_file)
    store.save(12)
    store.close()

    reopened = ScoreStore(db_file)
    assert reopened.load() == 12
    reopened.close()
