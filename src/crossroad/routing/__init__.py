"""Routing — pattern parsing, route validation, and the immutable router.

Routes are registered during setup and validated into an immutable
route table when the router is built.
"""
