"""Command line entry points for line-sift."""
