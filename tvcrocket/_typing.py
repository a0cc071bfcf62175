"""Runtime type checking shared by the package.

Scalars follow the PEP 484 numeric tower, so an int is accepted wherever
a float is hinted: ``bounded_tan(45)`` and ``configure(..., mass=10)``
are valid calls.
"""

from beartype import BeartypeConf
from beartype import beartype as _beartype

beartype = _beartype(conf=BeartypeConf(is_pep484_tower=True))
