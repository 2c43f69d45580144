"""
Application layer for the volume analysis engine.

This package contains:
- exceptions: Contract violations raised to callers
- use_cases/: Entry points that compose the core services into one analysis run
"""
