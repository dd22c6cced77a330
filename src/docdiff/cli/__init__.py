"""
Command line interface for docdiff.
"""
