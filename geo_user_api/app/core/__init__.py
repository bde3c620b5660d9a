"""
Configuration, logging, persistence, errors and security.
"""
