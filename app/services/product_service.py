# app/services/product_service.py
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from app.data.models.product import ProductModel
from app.domain.schemas import ProductIn, ProductOut
from app.repos.product_repo import ProductRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    """
    Use case'y dla produktow wystawianych przez sprzedawcow.
    Ograniczenia wartosci (cena, ilosc) pilnuje baza, serwis tylko
    zamienia ich naruszenie na ValueError.
    """

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    # query
    def get_product(self, product_id: int) -> ProductOut:
        product = self.repo.get_product(product_id)
        if not product:
            raise LookupError("Product not found")
        return ProductOut.model_validate(product)

    def list_products(self, seller_id: int | None = None) -> list[ProductOut]:
        return [ProductOut.model_validate(p) for p in self.repo.list_products(seller_id)]

    # commands
    def create_product(self, payload: ProductIn) -> ProductOut:
        if not self.repo.get_seller(payload.seller_id):
            raise ValueError("Seller does not exist")

        product = ProductModel(**payload.model_dump())
        created = self._save(product)

        logger.info(f"Utworzono produkt {created.id} sprzedawcy {created.seller_id}")
        return ProductOut.model_validate(created)

    def update_product(self, product_id: int, payload: ProductIn) -> ProductOut:
        product = self.repo.get_product(product_id)
        if not product:
            raise LookupError("Product not found")

        if product.seller_id != payload.seller_id:
            raise PermissionError("Product belongs to another seller")

        # pola nieprzeslane (np. colorOptions z formularza) zostaja bez zmian
        for field, value in payload.model_dump(exclude={"seller_id"}, exclude_unset=True).items():
            setattr(product, field, value)

        # schemat nie odswieza updated_at sam
        product.updated_at = func.now()

        updated = self._save(product)

        logger.info(f"Zaktualizowano produkt {updated.id}")
        return ProductOut.model_validate(updated)

    def _save(self, product: ProductModel) -> ProductModel:
        try:
            return self.repo.save_product(product)
        except (IntegrityError, DataError) as e:
            self.repo.rollback()
            logger.warning(f"Odrzucony zapis produktu: {e.orig}")
            raise ValueError("Product violates a database constraint") from e
