import os

class Config:
    DATABASE_PATH = os.environ.get('BOOKMARKS_DB') or 'bookmarks.db'
    OPENAI_API_KEY = os.environ.get('OPENAI_API_KEY')
    OPENAI_MODEL = os.environ.get('OPENAI_MODEL') or 'gpt-3.5-turbo'
    SUMMARY_FETCH_TIMEOUT = float(os.environ.get('SUMMARY_FETCH_TIMEOUT') or 15)
    DEBUG = os.environ.get('DEBUG', 'False').lower() == 'true'
    TESTING = False
    CACHE_TYPE = 'SimpleCache'
    CACHE_DEFAULT_TIMEOUT = 300

class TestConfig(Config):
    TESTING = True
    OPENAI_API_KEY = None
    CACHE_TYPE = 'NullCache'
