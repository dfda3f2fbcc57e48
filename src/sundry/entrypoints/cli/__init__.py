"""SUNDRY command-line interface."""
