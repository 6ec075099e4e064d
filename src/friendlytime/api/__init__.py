"""HTTP and WebSocket interface of the FriendlyTime service."""
