from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from .....db.models import Product, Sector, User, Notification, WatchlistEntry
from .....exceptions import DuplicateSKU
from .....application.ports.product_repo import ProductRepository, ProductDto, ProductInput

class SqlProductRepository(ProductRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, p: Product, sector: Optional[Sector] = None, creator: Optional[User] = None) -> ProductDto:
        return ProductDto(
            id=p.id,
            name=p.name,
            sku=p.sku,
            description=p.description,
            sector_id=p.sector_id,
            price=p.price,
            stock_quantity=p.stock_quantity,
            min_stock=p.min_stock,
            created_by=p.created_by,
            created_at=p.created_at,
            sector_name=sector.name if sector else None,
            sector_icon=sector.icon if sector else None,
            created_by_name=creator.username if creator else None,
        )

    def _joined(self):
        return (
            select(Product, Sector, User)
            .outerjoin(Sector, Sector.id == Product.sector_id)
            .outerjoin(User, User.id == Product.created_by)
        )

    def get_by_id(self, product_id: int) -> Optional[ProductDto]:
        row = self.session.exec(self._joined().where(Product.id == product_id)).first()
        return self._to_dto(*row) if row else None

    def find_id_by_sku(self, sku: str, exclude_id: Optional[int] = None) -> Optional[int]:
        # Rows written before normalization was enforced may still carry raw SKUs
        query = select(Product.id).where(func.upper(func.trim(Product.sku)) == sku)
        if exclude_id is not None:
            query = query.where(Product.id != exclude_id)
        return self.session.exec(query).first()

    def create(self, data: ProductInput, created_by: int) -> ProductDto:
        product = Product(
            name=data.name,
            sku=data.sku,
            description=data.description,
            sector_id=data.sector_id,
            price=data.price,
            stock_quantity=data.stock_quantity,
            min_stock=data.min_stock,
            created_by=created_by,
        )
        self.session.add(product)
        self._commit_sku(data.sku)
        self.session.refresh(product)
        return self.get_by_id(product.id)

    def update(self, product_id: int, data: ProductInput) -> bool:
        product = self.session.get(Product, product_id)
        if not product:
            return False
        product.name = data.name
        product.sku = data.sku
        product.description = data.description
        product.sector_id = data.sector_id
        product.price = data.price
        product.stock_quantity = data.stock_quantity
        product.min_stock = data.min_stock
        self.session.add(product)
        self._commit_sku(data.sku)
        return True

    def delete(self, product_id: int) -> bool:
        product = self.session.get(Product, product_id)
        if not product:
            return False
        for n in self.session.exec(select(Notification).where(Notification.product_id == product_id)).all():
            self.session.delete(n)
        for entry in self.session.exec(select(WatchlistEntry).where(WatchlistEntry.product_id == product_id)).all():
            self.session.delete(entry)
        # Dependent rows must be gone before the product on FK-enforcing backends
        self.session.flush()
        self.session.delete(product)
        self.session.commit()
        return True

    def list_all(self) -> List[ProductDto]:
        rows = self.session.exec(self._joined().order_by(Product.id)).all()
        return [self._to_dto(*row) for row in rows]

    def _commit_sku(self, sku: str) -> None:
        # The unique index on sku is the only constraint a product write can trip
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise DuplicateSKU(sku)
