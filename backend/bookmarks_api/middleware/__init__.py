"""
Bookmarks API - Middleware Package
==================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [CORS] → [Request ID] → [Logging] → [GZip] → [Bearer Token] → Route Handler

    - CORS outermost so 401 responses still carry CORS headers
    - Request ID before Logging so access lines carry the ID
    - Bearer Token innermost so rejected requests are still logged
"""
