import sqlalchemy as sa

from labdb.config import Settings
from labdb.util import db


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv('LABDB_DATABASE_URL', raising=False)
    monkeypatch.delenv('LABDB_ECHO', raising=False)

    settings = Settings()
    assert settings.database_url == 'sqlite://'
    assert settings.echo is False

def test_settings_from_env(monkeypatch):
    monkeypatch.setenv('LABDB_DATABASE_URL', 'sqlite:///lab.db')
    monkeypatch.setenv('LABDB_ECHO', 'true')

    settings = Settings()
    assert settings.database_url == 'sqlite:///lab.db'
    assert settings.echo is True

def test_get_engine_memory():
    engine = db.get_engine('sqlite://')
    assert engine.url.database in (None, '')

    with engine.connect() as connection:
        assert db.exec_scalar(connection, 'SELECT 1') == 1

    engine.dispose()

def test_get_engine_creates_parent(tmp_path):
    db_path = tmp_path / 'nested' / 'lab.db'
    engine = db.get_engine(f'sqlite:///{db_path}')

    assert db_path.parent.is_dir()
    engine.dispose()

def test_exec_scalar_binds_values():
    engine = sa.create_engine('sqlite://')

    with engine.connect() as connection:
        db.execute(connection, 'CREATE TABLE t (id INTEGER PRIMARY KEY, name TEXT)').close()
        db.execute(
            connection,
            'INSERT INTO t (id, name) VALUES (:id, :name)',
            [{'id': 1, 'name': 'a'}, {'id': 2, 'name': "b'); DROP TABLE t; --"}],
        ).close()

        name = db.exec_scalar(connection, 'SELECT name FROM t WHERE id = :id', {'id': 2})
        assert name == "b'); DROP TABLE t; --"
        assert db.exec_scalar(connection, 'SELECT COUNT(*) FROM t') == 2

    engine.dispose()
