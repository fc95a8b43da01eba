"""HTTP API for postplanner."""
