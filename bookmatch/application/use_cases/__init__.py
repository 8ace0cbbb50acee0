"""Use cases grouped by feature area."""
