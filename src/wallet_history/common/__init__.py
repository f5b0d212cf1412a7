"""
Common Layer - Shared Utilities
===============================

Utilities used by more than one layer (ingestion, history, charting).

Structure:
    common/
    └── utils/          # Utility functions
"""
