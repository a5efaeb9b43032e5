from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Student:
    id:         int
    first_name: str
    last_name:  str
    birthday:   date | None = None

    def __repr__(self) -> str:
        return (
            f"<Student(id={self.id}, first_name={self.first_name}, "
            f"last_name={self.last_name}, birthday={self.birthday})>"
        )
