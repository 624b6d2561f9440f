# hoyalist/db/__init__.py
"""
Document store access.
"""

from hoyalist.db.firestore import close_firestore, get_firestore, init_firestore

__all__ = [
    "close_firestore",
    "get_firestore",
    "init_firestore",
]
