"""
Language Server Protocol integration.
"""
