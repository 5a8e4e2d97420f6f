"""
Inventory Report Module

Validates untrusted inventory records, projects stock-out dates and renders
per-rep report emails. Delivery of the emails is left to the caller.
"""

__version__ = "1.0.0"
