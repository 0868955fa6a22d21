"""Document storage: upload, filtered lookup and download."""
import logging
from urllib.parse import quote
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload, undefer
from typing import List
from models.document import Document
from models.product import Product
from models.product_entry import ProductEntry
from schemas.document import Document as DocumentDTO, DocumentCreate, DocumentFilter
from utils.exceptions import AlreadyExistsError, InternalError, InvalidInputError, NotFoundError
from utils.mappers import to_document_dto

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"


def validate_upload(filename: str, content_type: str, content: bytes, max_size: int) -> None:
    if not filename:
        raise InvalidInputError("A file is required")
    if content_type != PDF_MEDIA_TYPE or not filename.lower().endswith(".pdf"):
        raise InvalidInputError("Only PDF files are allowed")
    if not content:
        raise InvalidInputError("The uploaded file is empty")
    if len(content) > max_size:
        raise InvalidInputError(f"File exceeds the maximum size of {max_size} bytes")


def content_disposition(filename: str) -> str:
    """Attachment header that survives any filename, encoded as in RFC 6266."""
    quoted = quote(filename, safe="")
    if quoted == filename:
        return f'attachment; filename="{filename}"'
    fallback = filename.encode("ascii", "replace").decode("ascii").replace('"', "").replace("\\", "")
    return f"attachment; filename=\"{fallback}\"; filename*=utf-8''{quoted}"


def is_duplicate_document(error: IntegrityError) -> bool:
    """True when the integrity failure comes from the filename-per-owner constraint."""
    message = str(error.orig)
    return "uq_documents_filename_user" in message or "documents.filename" in message


def add_document(db: Session, document: DocumentCreate) -> Document:
    """Stage a document in the current transaction without committing it."""
    if document.product_id is not None:
        if db.query(Product).filter(Product.id == document.product_id).first() is None:
            raise NotFoundError("Product not found")

    duplicate = db.query(Document).filter(
        Document.filename == document.filename,
        Document.user_id == document.user_id,
    ).first()
    if duplicate:
        raise AlreadyExistsError("Document already exists")

    db_document = Document(**document.model_dump())
    db.add(db_document)
    db.flush()
    return db_document

def create_document(db: Session, document: DocumentCreate) -> DocumentDTO:
    try:
        db_document = add_document(db, document)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if is_duplicate_document(e):
            raise AlreadyExistsError("Document already exists")
        logger.exception("failed to store document %s", document.filename)
        raise InternalError(str(e.orig))
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("failed to store document %s", document.filename)
        raise InternalError(str(e))

    db.refresh(db_document)
    logger.info("stored document %s (%s) for user %s", db_document.id, db_document.filename, db_document.user_id)
    return to_document_dto(db_document)

def find_with_filters(db: Session, filters: DocumentFilter) -> List[DocumentDTO]:
    query = db.query(Document).options(
        joinedload(Document.user),
        joinedload(Document.product),
    )

    if filters.file_type:
        query = query.filter(Document.file_type == filters.file_type)
    if filters.user_id:
        query = query.filter(Document.user_id == filters.user_id)
    if filters.id:
        query = query.filter(Document.id == filters.id)
    if filters.filename:
        query = query.filter(Document.filename.ilike(f"%{filters.filename}%"))
    if filters.upload_date:
        query = query.filter(func.date(Document.upload_date) == filters.upload_date.isoformat())

    return [to_document_dto(d) for d in query.order_by(Document.id).all()]

def find_by_id(db: Session, document_id: int) -> DocumentDTO:
    return to_document_dto(get_document_content(db, document_id))

def get_document_content(db: Session, document_id: int) -> Document:
    db_document = db.query(Document).options(undefer(Document.content)).filter(Document.id == document_id).first()
    if db_document is None:
        raise NotFoundError("Document not found")
    return db_document

def delete_document(db: Session, document_id: int) -> None:
    db_document = get_document_content(db, document_id)
    for entry in db.query(ProductEntry).filter(ProductEntry.document_id == document_id).all():
        entry.document_id = None
    db.delete(db_document)
    db.commit()
    logger.info("deleted document %s", document_id)
