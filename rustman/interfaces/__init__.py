"""User-facing interfaces for rustman (command line only)."""
