"""
Domain package for reducekit.

Exports the record types used by the record matcher and the lab fixtures.
"""

from reducekit.domain.models import Driver, Record

__all__ = [
    "Driver",
    "Record",
]
