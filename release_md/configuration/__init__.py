"""Configuration loading and reconciliation."""
