# Middleware package init
"""
Bev's Bakery Backend - Middleware Package
==========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Rate Limit] → [Request ID] → [Logging] → [Session] → [GZip] → [CORS] → Route

    1. Rate Limit first: order spam is rejected before any processing
    2. Request ID: correlation id for every later log line
    3. Logging: method, path, status and duration under that id
    4. Session: signed cookie carrying the admin flag (Starlette)
    5. GZip / CORS: Starlette built-ins

    Responses travel back through the chain in reverse, so the request id
    header and the access log line see the final status code.
"""
