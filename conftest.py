import os

# tests run against an in-memory database
os.environ['DATABASE_URL'] = 'sqlite://'
os.environ.pop('NYC_OPEN_DATA_TOKEN', None)
