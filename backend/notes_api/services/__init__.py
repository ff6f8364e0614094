# Services package init
"""
Notes API — Services Layer
============================

What:  Business logic between routes (HTTP) and repositories (storage).

Service Inventory:
    - NoteService: assigns identity and creation time, delegates storage

Services receive their repository through the constructor, so tests can pass
a mock and the route never needs to know which store is configured.
"""
