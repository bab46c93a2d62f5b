"""Account, session and post services."""
