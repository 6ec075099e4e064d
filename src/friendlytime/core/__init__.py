"""Core configuration for the FriendlyTime service."""
