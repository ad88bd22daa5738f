"""
Version 1 of the API.

This subpackage bundles the endpoints of the first public version of
the User Directory API.
"""
