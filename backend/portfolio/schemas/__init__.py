"""
Portfolio Backend — Pydantic Request/Response Schemas
=======================================================

What:  The API contract, one model per request body and response shape.
Why:   Bodies are validated at the boundary and responses are serialized
       through a declared model, which also drives the OpenAPI docs.

Modules:
    - common.py:    shared envelopes (message, data, delete result, errors, health)
    - auth.py:      register/login bodies and login response
    - resources.py: skill, blog and project bodies and stored records
"""
