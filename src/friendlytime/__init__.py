"""FriendlyTime: companion marketplace API with real-time chat."""

__version__ = "0.1.0"
