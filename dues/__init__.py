"""Recurring dues tracking and payment validation."""
