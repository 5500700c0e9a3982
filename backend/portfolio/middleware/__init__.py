"""
Portfolio Backend — Middleware Package
========================================

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID first so every later log line can carry it
    2. Logging measures the full handler duration and records the status
    3. CORS is FastAPI's CORSMiddleware (answers browser preflights)

Responses travel back through the chain in reverse, which is where the
X-Request-ID header is attached and the access line is written.
"""
