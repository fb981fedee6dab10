"""
Persistence mappers.

One mapper class per table.  A mapper is bound to an open
``sqlite3.Connection`` handed over by the service that owns the
transaction, issues one parameterised statement per method and turns
result rows into records.  Mappers contain no business rules and do not
catch database errors.
"""
