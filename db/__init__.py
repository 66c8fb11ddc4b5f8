"""
db/ - Database Layer
====================
PostgreSQL connection pooling, the integer-array column codec and the SQL
plan builder. This layer knows nothing about individual resource kinds;
it works from the schemas declared in ``models``.
"""
