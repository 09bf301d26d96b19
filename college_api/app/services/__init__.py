"""
Service layer.

Services hold the query logic over the in-memory dataset so that the
API handlers only translate HTTP parameters into service calls.
"""
