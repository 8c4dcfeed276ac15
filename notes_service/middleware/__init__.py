# Middleware package init
"""
Notes Service — Middleware Package
====================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → Route Handler

    Request ID runs first so the access log line carries the ID.
"""
