"""
Domain records.

Each module defines the persisted shape of one table and, where list or
detail queries join other tables, a ``*Detail`` read projection that
adds the joined columns.  Mappers write only the persisted fields; the
projections are produced by join queries and never written back.
"""
