from typing import List
from fastapi import APIRouter, Depends
from sqlmodel import Session

from ..database import get_session
from ..infrastructure.persistence.sqlalchemy.repositories.sector_repository_sql import SqlSectorRepository
from ..schemas import SectorResponse

router = APIRouter(prefix="/api/sectors", tags=["Sectors"])


@router.get("", response_model=List[SectorResponse])
def list_sectors(session: Session = Depends(get_session)):
    return [SectorResponse(**vars(s)) for s in SqlSectorRepository(session).list_all()]
