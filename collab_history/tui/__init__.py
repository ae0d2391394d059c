"""Textual display surface for the revision history."""
