# Services package init
"""
Bookmarks API - Services Layer
==============================

Service Inventory:
    - validation.py:       field rules for POST / PATCH bodies
    - sanitizer.py:        markup cleaning and outbound serialization
    - bookmark_service.py: storage gateway over the bookmarks table
"""
