import logging
from decimal import Decimal
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload
from typing import List
from crud import documents, products, suppliers
from models.product_entry import ProductEntry
from schemas.document import DocumentCreate
from schemas.product_entry import ProductEntry as ProductEntryDTO, ProductEntryCreate
from utils.exceptions import AlreadyExistsError, InternalError, NotFoundError
from utils.identifiers import generate_entry_id
from utils.mappers import to_product_entry_dto

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def compute_total(quantity: Decimal, unit_value: Decimal) -> Decimal:
    return (Decimal(quantity) * Decimal(unit_value)).quantize(CENTS)

def create_entry(
    db: Session,
    entry: ProductEntryCreate,
    filename: str,
    file_type: str,
    content: bytes,
    user_id: int,
    max_upload_size: int,
) -> ProductEntryDTO:
    """Store a stock receipt together with its attached invoice file.

    The submitted total is kept as sent; it is only filled in when missing.
    """
    documents.validate_upload(filename, file_type, content, max_upload_size)
    product = products.get_product(db, entry.product_id)
    suppliers.get_supplier(db, entry.supplier_id)

    try:
        db_document = documents.add_document(db, DocumentCreate(
            filename=filename,
            file_type=file_type or documents.PDF_MEDIA_TYPE,
            user_id=user_id,
            product_id=product.id,
            content=content,
        ))

        entry_data = entry.model_dump()
        if entry_data["total_value"] is None:
            entry_data["total_value"] = compute_total(entry.quantity, entry.unit_value)

        db_entry = ProductEntry(
            **entry_data,
            entry_code=generate_entry_id(product.name),
            document_id=db_document.id,
        )
        db.add(db_entry)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if documents.is_duplicate_document(e):
            raise AlreadyExistsError("Document already exists")
        logger.exception("failed to store product entry for invoice %s", entry.invoice_number)
        raise InternalError(str(e.orig))
    except Exception:
        db.rollback()
        raise

    db.refresh(db_entry)
    logger.info("created product entry %s (%s) for product %s", db_entry.id, db_entry.entry_code, product.id)
    return to_product_entry_dto(db_entry)

def _get_entry_entity(db: Session, entry_id: int) -> ProductEntry:
    db_entry = db.query(ProductEntry).filter(ProductEntry.id == entry_id).first()
    if db_entry is None:
        raise NotFoundError("Product entry not found")
    return db_entry

def get_entry(db: Session, entry_id: int) -> ProductEntryDTO:
    return to_product_entry_dto(_get_entry_entity(db, entry_id))

def get_entries(db: Session) -> List[ProductEntryDTO]:
    query = db.query(ProductEntry).options(
        joinedload(ProductEntry.product),
        joinedload(ProductEntry.supplier),
    )
    return [to_product_entry_dto(e) for e in query.order_by(ProductEntry.entry_date.desc(), ProductEntry.id.desc()).all()]

def delete_entry(db: Session, entry_id: int) -> None:
    db_entry = _get_entry_entity(db, entry_id)
    db.delete(db_entry)
    db.commit()
    logger.info("deleted product entry %s", entry_id)
