"""The single `MetaData` the park tables (cage, dinosaur, species) hang off.

Constraint and index names come from the naming convention below rather than
from the backend, so the names written by the Alembic revisions under
``alembic/versions`` are exactly the names the table objects declare. Index
and constraint templates use bare column *names*; a column label would repeat
the table name (``ix_dinosaur_dinosaur_cage_id``).

Resulting names on the park schema:
    - ``ix_dinosaur_cage_id``
    - ``uq_cage_label``, ``uq_dinosaur_name``
    - ``fk_dinosaur_cage_id_cage``, ``fk_dinosaur_species_species``
    - ``ck_cage_positive_max_occupancy``, ``ck_species_known_diet``
    - ``pk_cage``, ``pk_dinosaur``, ``pk_species``
"""

from sqlalchemy import MetaData

PARK_NAMING_CONVENTION = {
    "pk": "pk_%(table_name)s",
    "ix": "ix_%(table_name)s_%(column_0_N_name)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    "fk": "fk_%(table_name)s_%(column_0_N_name)s_%(referred_table_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
}

metadata = MetaData(naming_convention=PARK_NAMING_CONVENTION)
