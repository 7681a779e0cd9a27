"""
Pydantic schemas for the Orders API.

Request and response bodies use camelCase keys on the wire.
"""
