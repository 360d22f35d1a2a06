"""Command line interface for advisory-shield."""
