"""orgfix command line."""
