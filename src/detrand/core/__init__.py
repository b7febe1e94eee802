"""Configuration and data models for detrand."""
