import logging
from sqlalchemy.orm import Session
from typing import List, Optional
from models.product import Product
from schemas.product import ProductCreate, ProductUpdate
from utils.exceptions import InvalidInputError, NotFoundError

logger = logging.getLogger(__name__)


def create_product(db: Session, product: ProductCreate) -> Product:
    db_product = Product(**product.model_dump())
    db.add(db_product)
    db.commit()
    db.refresh(db_product)
    logger.info("created product %s", db_product.id)
    return db_product

def get_product(db: Session, product_id: int) -> Product:
    db_product = db.query(Product).filter(Product.id == product_id).first()
    if db_product is None:
        raise NotFoundError("Product not found")
    return db_product

def get_products(db: Session, search: Optional[str] = None) -> List[Product]:
    query = db.query(Product)

    if search:
        query = query.filter(Product.name.ilike(f'%{search}%'))

    return query.order_by(Product.id).all()

def update_product(db: Session, product_id: int, product_update: ProductUpdate) -> Product:
    db_product = get_product(db, product_id)
    update_data = product_update.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        setattr(db_product, key, value)
    db.commit()
    db.refresh(db_product)
    return db_product

def delete_product(db: Session, product_id: int) -> None:
    db_product = get_product(db, product_id)
    if db_product.entries or db_product.documents:
        raise InvalidInputError("Cannot delete product with entries or documents")
    db.delete(db_product)
    db.commit()
    logger.info("deleted product %s", product_id)
