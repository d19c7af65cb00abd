"""Feature packages for espyna."""
