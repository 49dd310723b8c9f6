"""recordstore-lite: a concurrency-safe in-memory CRUD record store."""
