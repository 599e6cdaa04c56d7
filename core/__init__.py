"""
Core package - Shared building blocks used across layers.
"""
