"""
HTTP inspection endpoint.
"""
