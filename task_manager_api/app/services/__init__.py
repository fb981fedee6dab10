"""
Service layer.

Each service encapsulates the business rules of one domain.  A service
method opens one transaction (``core.db.transaction``), hands its
connection to the mappers it needs, and either commits all of its
writes or none of them.  Routers only talk to services.
"""
