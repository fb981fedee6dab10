"""
Pydantic schema definitions for API payloads.

Request DTOs carry the field constraints that FastAPI checks before a
handler runs; enum fields arrive as plain strings and are coerced by
the services.  Page schemas bundle the records a screen needs into
one JSON document.  Schemas are separate from the records in
``app.models`` so the API shape can evolve independently of storage.
"""
