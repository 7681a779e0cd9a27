"""
Service layer for the Orders service.

Services hold the business rules and talk to storage only through a
repository passed to their constructor.
"""
