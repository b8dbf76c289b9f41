"""External adapters for the advtxt data store.

This package holds every third-party driver dependency and provides
implementations of the core port interface.

Adapter Organization:

- store/: Adapters for document persistence (MongoDB)
"""
