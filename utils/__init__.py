"""Configuration and tracing helpers shared by the number modules."""
