"""UserHub - a small CRUD service for user records."""
