'''
Conversions between SQL-native date values and `datetime.date`.

Drivers differ in what a DATE column comes back as: SQLite hands back the stored text
(`YYYY-MM-DD`, sometimes with a trailing time part), while typed drivers return
`date` or `datetime` objects. Everything is normalized to a plain `date`.
'''
from datetime import date, datetime


def sql_date_to_date(value) -> date | None:
    '''
    Convert a DATE column value into a `date`.

    Parameters:
        value: `None`, a `date`/`datetime`, or an ISO-8601 string

    Returns:
        `None` for SQL NULL, otherwise the matching `date`

    Raises:
        ValueError: on a string that isn't an ISO-8601 date
        TypeError:  on any other value type
    '''
    if value is None:
        return None

    # datetime subclasses date, check it first
    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        text = value.strip()
        if len(text) > 10 and text[10] in ' T':
            return datetime.fromisoformat(text).date()
        return date.fromisoformat(text)

    raise TypeError(f'Cannot convert {type(value).__name__} "{value!r}" to a date')
