"""Users service: user storage and placeholder endpoints."""
