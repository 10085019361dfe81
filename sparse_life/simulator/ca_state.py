from enum import StrEnum


class CAState(StrEnum):
    ALIVE = "alive"
    DEAD = "dead"

    def __repr__(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value
