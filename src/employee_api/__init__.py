"""Employee API package.

A thin Flask controller layer over a pass-through service and a MySQL
repository for a single Employee resource.
"""
