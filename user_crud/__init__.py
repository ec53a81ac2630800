"""Terminal CRUD client for a remote "users" REST resource.

The package keeps a local, in-memory view of the remote collection in sync
with the outcome of each HTTP exchange and renders it as a form and a list.
"""

__version__ = "0.1.0"
