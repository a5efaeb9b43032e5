'''
Engine and statement helpers shared by the table objects.

Statements go through `execute()` as SQL text with named placeholders; values are
always passed separately as `bind_params`:

    engine = db.get_engine('sqlite:///data/lab.db')
    with engine.connect() as connection:
        total = db.exec_scalar(connection, 'SELECT COUNT(*) FROM students')
'''

import logging
from pathlib import Path
from contextlib import closing

import sqlalchemy as sa

from labdb.config import settings


logger = logging.getLogger(__name__)

def get_engine(url: str | sa.URL | None = None, echo: bool | None = None):
    '''
    Create an engine for the provided URL, falling back to the configured
    `database_url`. For file-backed SQLite databases the parent folder is created if
    missing.
    '''
    if url is None:
        url = settings.database_url
    if echo is None:
        echo = settings.echo

    url = sa.make_url(url)
    if url.drivername.startswith('sqlite') and url.database not in (None, '', ':memory:'):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    logger.debug(f'Creating engine for "{url.render_as_string(hide_password=True)}"')
    return sa.create_engine(url, echo=echo)

def execute(connection, sql: str, bind_params=None):
    '''
    Execute a single textual statement on an open connection. Nothing is interpolated
    into `sql`; values travel through `bind_params` and are referenced by `:name`.

    The returned result is the caller's to close.
    '''
    return connection.execute(sa.text(sql), bind_params)

def exec_scalar(connection, sql: str, bind_params=None):
    '''
    First column of the first row, with the result closed before returning
    '''
    with closing(execute(connection, sql, bind_params)) as res:
        return res.scalar()
