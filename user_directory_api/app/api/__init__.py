"""
API package: versioned routes, request dependencies and error
rendering.
"""
