"""Netsnap command implementations."""
