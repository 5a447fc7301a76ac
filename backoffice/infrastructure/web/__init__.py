"""
HTTP surface of the back-office API.
"""
