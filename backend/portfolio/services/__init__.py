"""
Portfolio Backend — Services Layer
====================================

What:  Business logic between routes (HTTP) and MongoDB (persistence).
How:   Services receive the database handle per call, make one store call,
       and return a response schema or raise an application exception.

Service Inventory:
    - AuthService:     register / login against `users`
    - ResourceService: CRUD for one collection; instances for skills,
                       blogs and projects
"""
