"""Default adapters implementing the application ports."""
