"""
Implementations SQLModel des repositories.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from showtrakt.infrastructure.persistence.repositories.show_repository import (
    SQLModelShowRepository,
)

__all__ = [
    "SQLModelShowRepository",
]
