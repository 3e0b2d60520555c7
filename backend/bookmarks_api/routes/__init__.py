# Routes package init
"""
Bookmarks API - Routes Package
==============================

Route Inventory:
    - bookmarks.py: /bookmarks and /bookmarks/{id} (under API_PREFIX)
    - health.py:    GET /health

Routes handle HTTP concerns (status codes, headers) and delegate field
rules to the validator and table access to the storage gateway.
"""
