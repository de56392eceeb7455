"""
Location store.

Persistence layer for Location and LocationTag records of a medical-record
system, with a thin service layer and HTTP surface on top.
"""
__version__ = "0.1.0"
