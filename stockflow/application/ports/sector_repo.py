from dataclasses import dataclass
from typing import Protocol, List, Optional


@dataclass
class SectorDto:
    id: int
    name: str
    description: Optional[str]
    icon: str


class SectorRepository(Protocol):
    def list_all(self) -> List[SectorDto]:
        ...

    def get_by_id(self, sector_id: int) -> Optional[SectorDto]:
        ...
