"""Resources that lie on the map and fill player inventories."""

from enum import Enum


class Resource(Enum):
    """A kind of object found in the world, in its canonical order."""

    FOOD = "Nourriture"
    LINEMATE = "Linemate"
    DERAUMERE = "Deraumere"
    SIBUR = "Sibur"
    MENDIANE = "Mendiane"
    PHIRAS = "Phiras"
    THYSTAME = "Thystame"

    def label(self) -> str:
        """Return the display name of the resource."""
        return self.value