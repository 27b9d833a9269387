import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))
DATABASE_PATH = os.path.abspath(os.environ.get('RESULTS_DB', os.path.join(BASE_DIR, 'results.db')))


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'change-me')
    # open the results database read only; nothing in the app writes to it
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        'SQLALCHEMY_DATABASE_URI',
        f"sqlite:///file:{DATABASE_PATH}?mode=ro&uri=true",
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    DEBUG = os.environ.get('DEBUG', '').lower() in ('1', 'true', 'yes')
    PORT = int(os.environ.get('PORT') or 8080)
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
