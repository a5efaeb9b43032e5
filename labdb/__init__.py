'''
labdb

Table access objects over plain SQL. Each table wraps a caller-owned SQLAlchemy
connection and maps the rows of one relation to value objects.

.. code-block:: python

    from labdb import StudentsTable
    from labdb.util import db

    engine = db.get_engine('sqlite://')
    with engine.connect() as connection:
        students = StudentsTable(connection)
        students.create_table()
        students.find_all()
'''
from labdb.table   import Table
from labdb.student import Student
from labdb.errors  import (
    LabDBError,
    QueryError,
    RowMappingError,
    StudentNotFound,
    NotYetImplemented,
)

from labdb.tables  import StudentsTable
