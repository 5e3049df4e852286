"""
Pydantic schema definitions for API payloads.

Each collection (users, products) defines its own models for request
and response bodies; ``common`` holds the response envelope shared by
every route.  The ``Create`` models double as the validation layer:
services run incoming payloads through them before anything is stored.
"""
