import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    SQLALCHEMY_DATABASE_URI = os.getenv(
        'DATABASE_URL',
        'mysql+pymysql://root:@127.0.0.1:3306/retur_db?charset=utf8mb4'
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = os.getenv('SECRET_KEY', 'supersecretkey123')

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    CORS_ORIGINS = [o.strip() for o in os.getenv('CORS_ORIGINS', 'http://localhost:3000').split(',') if o.strip()]
    SOCKETIO_ASYNC_MODE = os.getenv('SOCKETIO_ASYNC_MODE', 'threading')

    STORAGE_BACKEND = os.getenv('STORAGE_BACKEND', 'sql')  # sql|memory
    AUTO_CREATE_TABLES = _env_flag('AUTO_CREATE_TABLES', True)
    RETURS_URL_PREFIX = os.getenv('RETURS_URL_PREFIX', '')

    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = int(os.getenv('PORT', '8080'))


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    STORAGE_BACKEND = 'sql'
    AUTO_CREATE_TABLES = True
    RETURS_URL_PREFIX = ''
    LOG_LEVEL = 'DEBUG'
