"""Worked solutions for optionals, protocols and closures."""
