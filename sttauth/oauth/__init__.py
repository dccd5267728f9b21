"""JWT-bearer token exchange for service accounts."""
