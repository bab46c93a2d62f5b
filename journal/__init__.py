"""Journal: a small session-authenticated blog."""
