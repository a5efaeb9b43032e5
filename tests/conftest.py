import pytest
import sqlalchemy as sa

from labdb import StudentsTable

from setups import students as setup


@pytest.fixture
def connection():
    engine = sa.create_engine('sqlite://')
    with engine.connect() as connection:
        yield connection
    engine.dispose()

@pytest.fixture
def table(connection):
    students = StudentsTable(connection)
    assert students.create_table()
    return students

@pytest.fixture
def populated(table, connection):
    setup.insert_students(connection)
    return table
