"""Services Layer: use cases orchestrating repositories and core rules."""
