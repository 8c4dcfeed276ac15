# Routes package init
"""
Notes Service — API Routes Package
====================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - notes.py:   GET/PUT/DELETE /notes/{name}, GET /notes,
                  POST /write, GET /UploadForm.html
    - health.py:  GET /health
    - meta.py:    GET /routes (route table as data)

Design Principle:
    Routes are THIN: extract request data, call NoteService, shape the
    response. Rules live in services.
"""
