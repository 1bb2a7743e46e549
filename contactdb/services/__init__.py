"""Read-side services composed from the repository layer."""
