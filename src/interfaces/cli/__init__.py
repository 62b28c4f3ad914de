"""Command-line demos for the command and strategy patterns."""
