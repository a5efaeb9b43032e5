'''
Students table

Access object for the `students` relation, built on plain SQL text executed over a
connection owned by the caller. The table never opens, commits or closes the
connection; it only scopes the results of its own statements.

Note: statement construction
    Statement text is fixed at module level. The only variable parts of a query are
    values, and those are always bound through named placeholders:

    .. code-block:: python

        # never this: the id text becomes part of the SQL
        f'SELECT * FROM students WHERE id = {student_id}'

        # always this: the driver ships the id separately from the statement
        connection.execute(sa.text('SELECT * FROM students WHERE id = :id'), {'id': student_id})

    An id like `'1 OR 1=1'` or `'1; DROP TABLE students'` is then just a value that
    matches no row, instead of a change to the query's structure.

Note: lenient and strict lookups
    `find_by_primary_key()`, `find_all()` and `create_table()` swallow execution errors,
    logging them and returning `None`, `[]` or `False`. `get()` and `count()` raise
    instead, which lets a caller tell "no such student" (`StudentNotFound`) apart from a
    failed query (`QueryError`); a stored row that can't be mapped raises
    `RowMappingError`.

    No rollback follows a swallowed failure: the connection and its transaction belong
    to the caller. Backends that abort the whole transaction on an error (PostgreSQL,
    for one) then fail every later statement on that connection, so the lenient methods
    keep answering `None` or `[]` until the caller rolls back.
'''
import logging
from datetime import date
from contextlib import closing

import sqlalchemy as sa

from labdb import util
from labdb.student import Student
from labdb.errors import QueryError, RowMappingError, StudentNotFound, NotYetImplemented


logger = logging.getLogger(__name__)

TABLE_NAME = 'students'

CREATE_SQL = f'''
CREATE TABLE {TABLE_NAME} (
    id        INTEGER  NOT NULL PRIMARY KEY,
    firstName CHAR(40) NOT NULL,
    lastName  CHAR(40) NOT NULL,
    birthday  DATE
)
'''
SELECT_ALL_SQL = f'SELECT id, firstName, lastName, birthday FROM {TABLE_NAME}'
SELECT_BY_ID_SQL = f'{SELECT_ALL_SQL} WHERE id = :id'
COUNT_SQL = f'SELECT COUNT(*) FROM {TABLE_NAME}'

# the driver raises OverflowError/TypeError while binding values it can't store (e.g. an
# int outside SQLite's 64-bit range); SQLAlchemy lets those through unwrapped
EXECUTION_ERRORS = (sa.exc.SQLAlchemyError, OverflowError, TypeError)


class StudentsTable:
    '''
    Maps rows of the `students` table to `Student` objects. Satisfies
    `Table[Student, int]`.

    Parameters:
        connection: open SQLAlchemy connection; remains owned by the caller
    '''
    TABLE_NAME = TABLE_NAME

    def __init__(self, connection: sa.Connection):
        if connection is None:
            raise ValueError('StudentsTable requires an open connection')

        self.connection = connection

    def get_table_name(self) -> str:
        return self.TABLE_NAME

    def _execute(self, sql: str, bind_params=None):
        try:
            return util.db.execute(self.connection, sql, bind_params)
        except EXECUTION_ERRORS as e:
            raise QueryError(sql, e) from e

    def create_table(self) -> bool:
        try:
            self._execute(CREATE_SQL).close()
        except QueryError as e:
            logger.warning(f'Creating table "{self.TABLE_NAME}" failed: {e.orig}')
            return False

        logger.info(f'Created table "{self.TABLE_NAME}"')
        return True

    def find_by_primary_key(self, student_id: int) -> Student | None:
        try:
            with closing(self._execute(SELECT_BY_ID_SQL, {'id': student_id})) as result:
                students = self._read_students(result)
        except QueryError as e:
            logger.warning(f'Lookup of student {student_id!r} failed: {e.orig}')
            return None

        return students[0] if students else None

    def get(self, student_id: int) -> Student:
        '''
        Strict counterpart to `find_by_primary_key()`.

        Raises:
            StudentNotFound: no row has the given id
            QueryError:      the lookup itself failed
            RowMappingError: the stored row doesn't convert to a `Student`
        '''
        with closing(self._execute(SELECT_BY_ID_SQL, {'id': student_id})) as result:
            try:
                row = result.first()
            except sa.exc.SQLAlchemyError as e:
                raise QueryError(SELECT_BY_ID_SQL, e) from e

        if row is None:
            raise StudentNotFound(student_id)

        try:
            return self._row_to_student(row)
        except (ValueError, TypeError) as e:
            raise RowMappingError(self.TABLE_NAME, student_id, e) from e

    def find_all(self) -> list[Student]:
        try:
            with closing(self._execute(SELECT_ALL_SQL)) as result:
                return self._read_students(result)
        except QueryError as e:
            logger.error(f'Reading all rows of "{self.TABLE_NAME}" failed: {e.orig}')
            return []

    def count(self) -> int:
        try:
            return util.db.exec_scalar(self.connection, COUNT_SQL)
        except EXECUTION_ERRORS as e:
            raise QueryError(COUNT_SQL, e) from e

    def find_by_birthday(self, birthday: date) -> list[Student]:
        raise NotYetImplemented('find_by_birthday')

    def drop_table(self) -> bool:
        raise NotYetImplemented('drop_table')

    def save(self, student: Student) -> bool:
        raise NotYetImplemented('save')

    def delete(self, student_id: int) -> bool:
        raise NotYetImplemented('delete')

    def update(self, student: Student) -> bool:
        raise NotYetImplemented('update')

    @staticmethod
    def _row_to_student(row) -> Student:
        student_id, first_name, last_name, birthday = row

        # CHAR columns come back blank-padded on some backends
        return Student(
            id=int(student_id),
            first_name=first_name.rstrip(),
            last_name=last_name.rstrip(),
            birthday=util.dates.sql_date_to_date(birthday),
        )

    def _read_students(self, result) -> list[Student]:
        '''
        Map every row of `result` to a `Student`.

        A row that can't be read or converted stops the scan: the failure is logged and
        the students mapped up to that point are returned.
        '''
        students = []
        try:
            for row in result:
                students.append(self._row_to_student(row))
        except (sa.exc.SQLAlchemyError, ValueError, TypeError):
            logger.exception(
                f'Reading rows of "{self.TABLE_NAME}" stopped after {len(students)} students'
            )

        return students
