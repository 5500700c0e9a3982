"""
Portfolio Backend — API Routes Package
========================================

What:  HTTP route handlers; thin wrappers that call a service and return its
       response model with the right status code.

Route Inventory (all API paths under /api/v1):
    - auth.py:      POST /register, POST /login
    - skills.py:    /skills        (built by resources.create_resource_router)
    - blogs.py:     /blogs
    - projects.py:  /projects
    - health.py:    GET /, GET /health
"""

API_PREFIX = "/api/v1"
