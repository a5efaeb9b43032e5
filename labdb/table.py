'''
Table

Capability interface for table access objects. A table maps rows of a single relation
to value objects of type V, keyed by a primary key of type K, and exposes the basic
lifecycle of that relation: creating and dropping it, and the CRUD operations over its
rows.

Tables satisfy the interface structurally; there's no shared base class to inherit
from. Anything with the right methods is a `Table`:

.. code-block:: python

    class CoursesTable:
        def get_table_name(self): ...
        def create_table(self): ...
        ...

    isinstance(CoursesTable(connection), Table)  # True
'''
from typing import Protocol, TypeVar, runtime_checkable

V = TypeVar('V')
K = TypeVar('K')


@runtime_checkable
class Table(Protocol[V, K]):
    def get_table_name(self) -> str:
        ...

    def create_table(self) -> bool:
        '''
        Create the relation. Returns whether the creation succeeded.
        '''
        ...

    def find_by_primary_key(self, key: K) -> V | None:
        ...

    def find_all(self) -> list[V]:
        ...

    def drop_table(self) -> bool:
        ...

    def save(self, value: V) -> bool:
        ...

    def delete(self, key: K) -> bool:
        ...

    def update(self, value: V) -> bool:
        ...
