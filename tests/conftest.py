import sqlite3

import pytest
from fastapi.testclient import TestClient

from ecdict_api.config import Settings
from ecdict_api.main import create_app

ROWS = [
    ('hello', 'a greeting', '你好', '/həˈloʊ/'),
    ('hell', 'a place of torment', '地狱', 'hel'),
    ('help', 'to give assistance', '帮助', 'help'),
    ('hallo', 'variant of hello', '喂', 'hə\'ləʊ'),
    ('abc', 'the alphabet', '字母表', 'ˌeɪbiːˈsiː'),
    ('world', 'the earth', '世界', 'wɜːld'),
    ('nullish', 'row with missing columns', None, None),
] + [(f"ab{i:02d}", f"filler {i}", f"填充 {i}", '') for i in range(15)]

def build_store(path, rows=ROWS):
    # Same shape as the ECDICT stardict table, trimmed to a few extra columns
    conn = sqlite3.connect(str(path))
    conn.execute(
        'create table stardict ('
        'id integer primary key autoincrement, word varchar(64) not null unique, '
        'sw varchar(64), phonetic varchar(64), definition text, translation text, '
        'collins integer default 0)'
    )
    conn.executemany(
        'insert into stardict (word, definition, translation, phonetic) values (?, ?, ?, ?)',
        rows,
    )
    conn.commit()
    conn.close()
    return path

@pytest.fixture
def store_path(tmp_path):
    return build_store(tmp_path / 'stardict.db')

@pytest.fixture
def settings(store_path):
    return Settings(db_path=str(store_path), pool_size=4)

@pytest.fixture
def app(settings):
    return create_app(settings)

@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client

@pytest.fixture
def binary_store_path(tmp_path):
    # phonetic stored as a BLOB that is not valid UTF-8
    return build_store(tmp_path / 'binary.db', ROWS + [('bin', 'd', 't', b'\x00\xff')])
