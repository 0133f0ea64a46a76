# Routes package init
"""
NoteKeeper Backend — API Routes Package
=========================================

Route Inventory:
    - auth.py:    POST   /api/login
    - notes.py:   GET    /api/items
                  POST   /api/items
                  PUT    /api/items/{id}
                  DELETE /api/items/{id}
    - health.py:  GET    /api/health

Routes stay thin: pull data out of the request, call a service, let the
global exception handlers shape any error.
"""
