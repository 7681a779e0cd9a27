"""
Endpoint modules for the Users API.
"""
