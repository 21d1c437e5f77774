import os

NYC_OPEN_DATA_TOKEN = os.getenv('NYC_OPEN_DATA_TOKEN')

MYSQL_DATABASE = os.getenv('MYSQL_DATABASE')
MYSQL_PASSWORD_STR = os.getenv('MYSQL_PASSWORD') or ''
MYSQL_URI = (f"mysql+pymysql://{os.getenv('MYSQL_USER')}:"
             f"{MYSQL_PASSWORD_STR}@{os.getenv('MYSQL_HOST') or 'localhost'}/"
             f"{MYSQL_DATABASE}?charset=utf8mb4")

# an unconfigured checkout runs against an in-memory database
DATABASE_URL = os.getenv('DATABASE_URL') or (
    MYSQL_URI if MYSQL_DATABASE else 'sqlite://')

SECRET_KEY = os.getenv('SECRET_KEY') or 'dev-secret'

DEFAULT_RESULT_LIMIT = int(os.getenv('DEFAULT_RESULT_LIMIT') or 50)
MAX_RESULT_LIMIT = int(os.getenv('MAX_RESULT_LIMIT') or 1000)

MIN_PASSWORD_LENGTH = 8
