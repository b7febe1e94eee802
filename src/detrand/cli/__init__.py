"""detrand command-line interface."""
