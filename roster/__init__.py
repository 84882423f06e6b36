"""Roster: user and role management API with bearer-token authentication."""
