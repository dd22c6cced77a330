"""
HTTP API for docdiff.
"""
