"""Match domain services: creation and guess evaluation.

This package contains the handler logic that HTTP routes and document
triggers call into, keeping transport concerns separated from the match
lifecycle (waiting -> finished).
"""
