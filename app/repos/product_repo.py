# app/repos/product_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel
from app.data.models.user import UserModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def get_seller(self, seller_id: int) -> UserModel | None:
        return self.db.get(UserModel, seller_id)

    def list_products(self, seller_id: int | None = None) -> list[ProductModel]:
        stmt = select(ProductModel).order_by(ProductModel.id)
        if seller_id is not None:
            stmt = stmt.where(ProductModel.seller_id == seller_id)
        return list(self.db.execute(stmt).scalars().all())

    def save_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def rollback(self):
        self.db.rollback()
