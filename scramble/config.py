from __future__ import annotations
import logging
import os
from pathlib import Path

DATA_DIR = Path(__file__).parent / 'data'


def _flag(name: str, default: str = '0') -> bool:
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    # Root words, one per line
    WORDS_PATH = os.environ.get('SCRAMBLE_WORDS_PATH') or str(DATA_DIR / 'start.txt')
    FALLBACK_WORD = os.environ.get('SCRAMBLE_FALLBACK_WORD') or 'silkworm'
    # Dictionary backend: 'wordfreq' or 'wordlist'
    LANGUAGE = os.environ.get('SCRAMBLE_LANGUAGE') or 'en'
    DICTIONARY = os.environ.get('SCRAMBLE_DICTIONARY') or 'wordfreq'
    DICTIONARY_PATH = os.environ.get('SCRAMBLE_DICTIONARY_PATH')
    MIN_ZIPF = float(os.environ.get('SCRAMBLE_MIN_ZIPF', '2.5'))
    # Optional gameplay rules, both off by default
    MIN_WORD_LENGTH = int(os.environ.get('SCRAMBLE_MIN_WORD_LENGTH', '1'))
    REJECT_ROOT_WORD = _flag('SCRAMBLE_REJECT_ROOT_WORD')
    CORS_ORIGINS = [o.strip() for o in os.environ.get('SCRAMBLE_CORS_ORIGINS', '*').split(',') if o.strip()]
    LOG_LEVEL = os.environ.get('SCRAMBLE_LOG_LEVEL', 'INFO')


def configure_logging(level: str = Config.LOG_LEVEL):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
