"""Private helpers shared by the core types."""
