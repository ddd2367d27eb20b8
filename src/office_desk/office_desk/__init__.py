"""Office Desk package.

This package is organized by feature modules (tickets, projects, leaves, ...)
with a thin Flask controller layer over service and repository layers.
"""
