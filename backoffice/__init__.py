"""
Agency back-office service.
Keeps project aggregates (credentials, hosting, payments) in sync with their
relational storage and exposes them over HTTP.
"""

__version__ = "1.0.0"
