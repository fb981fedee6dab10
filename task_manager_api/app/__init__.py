"""
Application package.

Layers, from storage up: ``core`` (settings, database, logging,
security, errors), ``models`` (records and enums), ``mappers`` (SQL),
``services`` (business rules and transactions), ``schemas`` (request and
page payloads) and ``api`` (FastAPI routers).
"""
