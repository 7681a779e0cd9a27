"""Users and Orders microservices."""
