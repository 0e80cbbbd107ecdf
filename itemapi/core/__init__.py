"""Configuration for the application."""
