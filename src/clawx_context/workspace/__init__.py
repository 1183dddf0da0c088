"""Agent workspace discovery."""
