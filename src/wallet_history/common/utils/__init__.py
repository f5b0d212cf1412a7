"""
Utilities Module - Shared Helper Functions
===========================================

Provides shared utilities used across multiple layers:
- Date/time utilities (timestamp parsing, UTC normalization, month windows)
"""
