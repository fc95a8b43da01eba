"""Authentication for postplanner."""
