"""Shufflax command-line interface."""
