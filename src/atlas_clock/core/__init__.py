"""Session state, persistence and time resolution."""
