"""Orders service: CRUD over the ``orders`` table."""
