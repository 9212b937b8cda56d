"""
Application layer for railchain: configuration and the command-line interface.
"""
