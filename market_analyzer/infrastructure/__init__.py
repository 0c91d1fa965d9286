"""Infrastructure adapters for storage, snapshots, reports and logging."""
