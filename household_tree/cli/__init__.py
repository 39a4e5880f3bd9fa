"""Command-line interface for Household Tree."""
