"""Records app for the GBVMIS backend.

Holds the record models, the generic record access layer (pagination,
search filters, sparse updates) and the ``/api`` routes built on it.
"""
