"""Speech-to-text clients that consume service-account tokens."""
