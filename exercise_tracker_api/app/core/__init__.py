"""
Core infrastructure: configuration, logging, errors, dates and the store.
"""
