from labdb.tables.students import StudentsTable
