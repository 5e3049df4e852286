"""
Service layer abstraction.

Each service encapsulates the business logic for one collection:
validate the incoming payload, then hand it to the store.  Handlers
talk only to services, so the storage backend can change without
touching the API layer.
"""
