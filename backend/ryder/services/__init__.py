"""Domain services consumed by the HTTP routes and socket handlers."""
