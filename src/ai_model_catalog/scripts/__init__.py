"""Maintenance scripts for the model catalog."""
