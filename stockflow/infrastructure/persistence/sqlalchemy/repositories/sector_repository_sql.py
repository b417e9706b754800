from typing import List, Optional
from sqlmodel import Session, select

from .....db.models import Sector
from .....application.ports.sector_repo import SectorRepository, SectorDto

class SqlSectorRepository(SectorRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, s: Sector) -> SectorDto:
        return SectorDto(id=s.id, name=s.name, description=s.description, icon=s.icon)

    def list_all(self) -> List[SectorDto]:
        rows = self.session.exec(select(Sector).order_by(Sector.name)).all()
        return [self._to_dto(r) for r in rows]

    def get_by_id(self, sector_id: int) -> Optional[SectorDto]:
        if sector_id is None:
            return None
        s = self.session.get(Sector, sector_id)
        return self._to_dto(s) if s else None
