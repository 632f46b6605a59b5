"""Core components for Image Publisher."""
