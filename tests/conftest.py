import pytest
from fastapi.testclient import TestClient

from scramble.config import Config
from scramble.dictionary import DictionaryService
from scramble.game_logic import RoundEngine
from scramble.managers.game import GameManager
from scramble import main


class TestConfig(Config):
    DICTIONARY = 'wordlist'
    DICTIONARY_PATH = None
    LANGUAGE = 'en'
    FALLBACK_WORD = 'silkworm'
    MIN_WORD_LENGTH = 1
    REJECT_ROOT_WORD = False


@pytest.fixture()
def words_file(tmp_path):
    path = tmp_path / 'start.txt'
    path.write_text('listen\n', encoding='utf-8')
    return path


@pytest.fixture()
def test_config(words_file):
    class _Config(TestConfig):
        WORDS_PATH = str(words_file)
    return _Config


@pytest.fixture()
def checker():
    return DictionaryService()


@pytest.fixture()
def engine(checker):
    round_engine = RoundEngine(checker)
    round_engine.start_round('listen')
    return round_engine


@pytest.fixture()
def manager(test_config, checker):
    return GameManager(test_config, checker=checker)


@pytest.fixture()
def client(manager, monkeypatch):
    monkeypatch.setattr(main, 'games', manager)
    monkeypatch.setattr(main.app.state, 'games', manager)
    return TestClient(main.app)
