"""Command-line tools for working with Yext API errors."""
