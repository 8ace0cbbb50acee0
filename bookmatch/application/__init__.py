"""Application services orchestrating domain entities and repositories."""
