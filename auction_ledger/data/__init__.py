"""
Ledger data model

Notes
-----
Data model class names are prefixed with a 'T', which identifies them as classes that map to database tables.
"""

from sqlalchemy.orm import DeclarativeBase, MappedAsDataclass


class Base(MappedAsDataclass, DeclarativeBase):
    """
    Data model base class.

    All data model classes should extend Base.
    """

    # pylint: disable=too-few-public-methods
