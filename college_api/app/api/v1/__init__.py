"""
Version 1 of the API.

Breaking changes to the public paths belong in a new version
subpackage.
"""
