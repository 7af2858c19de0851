from enum import Enum
from typing import Optional


class Strand(Enum):
    PLUS = 1
    MINUS = -1
    UNSTRANDED = 0

    def __str__(self):
        return str(self.to_symbol())

    @staticmethod
    def from_symbol(value: str):
        """Converts string representation of a strand to a Strand"""
        if value == "+":
            return Strand.PLUS
        if value == "-":
            return Strand.MINUS
        if value == ".":
            return Strand.UNSTRANDED
        raise ValueError("{} is not a valid string representation of a strand".format(value))

    def to_symbol(self) -> str:
        if self == Strand.PLUS:
            return "+"
        if self == Strand.MINUS:
            return "-"
        return "."

    @staticmethod
    def from_int(value: int):
        """Converts integer representation of a strand to a Strand"""
        return Strand(value)  # Raises ValueError for invalid int

    @staticmethod
    def from_biopython(value: Optional[int]) -> "Strand":
        """BioPython uses ``None`` for an unknown strand and ``0`` for a strandless feature; both are UNSTRANDED."""
        if value is None:
            return Strand.UNSTRANDED
        return Strand.from_int(value)

    def to_biopython(self) -> Optional[int]:
        if self == Strand.UNSTRANDED:
            return None
        return self.value
