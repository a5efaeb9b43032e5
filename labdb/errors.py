'''
Errors raised by table objects.

The set is closed: every failure a table reports is one of the types below.
`QueryError` wraps driver-level failures, `StudentNotFound` separates "no such row"
from a failed query, `RowMappingError` flags a stored row that doesn't convert to a
value object, and `NotYetImplemented` marks table operations that are still stubs.
'''


class LabDBError(Exception):
    pass


class QueryError(LabDBError):
    '''
    A statement failed to execute.

    Attributes:
        statement: SQL text that was sent, with placeholders left unbound
        orig:      the underlying SQLAlchemy (or DB-API) exception
    '''
    def __init__(self, statement: str, orig: Exception):
        self.statement = statement
        self.orig = orig
        super().__init__(f'Query failed: {orig}')


class RowMappingError(LabDBError):
    '''
    A row was read but its values don't fit the value object (e.g. a birthday that isn't
    a date).

    Attributes:
        table: name of the table the row came from
        key:   primary key of the row
        orig:  the conversion error
    '''
    def __init__(self, table: str, key, orig: Exception):
        self.table = table
        self.key = key
        self.orig = orig
        super().__init__(f'Row {key!r} of "{table}" could not be mapped: {orig}')


class StudentNotFound(LabDBError, LookupError):
    def __init__(self, student_id):
        self.student_id = student_id
        super().__init__(f'No student with id {student_id!r}')


class NotYetImplemented(LabDBError, NotImplementedError):
    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f'"{operation}" is not implemented yet')
