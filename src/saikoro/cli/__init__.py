"""Saikoro command-line interface."""
