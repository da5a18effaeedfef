"""
Authors domain: author accounts, registration and authentication.
"""
