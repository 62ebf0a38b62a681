"""
Shared MagicStream backend library code.

This package holds the movie catalog domain: records, stores and the query
service. The FastAPI app in `api/` imports from `magicstream_backend`, never
the other way around.
"""
