"""
Endpoint modules for the Orders API.
"""
