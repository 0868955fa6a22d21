from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import Response
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date
from config import Settings, get_settings
from database import get_db
from schemas.document import Document, DocumentCreate, DocumentFilter
from schemas.user import User
from crud import documents
from crud.api.v1.deps import get_current_user

router = APIRouter(dependencies=[Depends(get_current_user)])

@router.get("/", response_model=List[Document])
def list_documents(
    file_type: Optional[str] = None,
    user_id: Optional[int] = None,
    id: Optional[int] = None,
    filename: Optional[str] = None,
    upload_date: Optional[date] = None,
    db: Session = Depends(get_db),
):
    filters = DocumentFilter(
        file_type=file_type,
        user_id=user_id,
        id=id,
        filename=filename,
        upload_date=upload_date,
    )
    return documents.find_with_filters(db, filters)

@router.post("/", response_model=Document, status_code=201)
async def upload_document(
    file: UploadFile = File(...),
    product_id: Optional[int] = Form(None),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    content = await file.read()
    documents.validate_upload(file.filename, file.content_type, content, settings.MAX_UPLOAD_SIZE)
    return documents.create_document(db, DocumentCreate(
        filename=file.filename,
        file_type=file.content_type or documents.PDF_MEDIA_TYPE,
        user_id=current_user.id,
        product_id=product_id,
        content=content,
    ))

@router.get("/{document_id}", response_model=Document)
def get_document(document_id: int, db: Session = Depends(get_db)):
    return documents.find_by_id(db, document_id)

@router.get("/{document_id}/download")
def download_document(document_id: int, db: Session = Depends(get_db)):
    db_document = documents.get_document_content(db, document_id)
    return Response(
        content=db_document.content,
        media_type=db_document.file_type,
        headers={"Content-Disposition": documents.content_disposition(db_document.filename)},
    )

@router.delete("/{document_id}")
def delete_document(document_id: int, db: Session = Depends(get_db)):
    documents.delete_document(db, document_id)
    return {"status": "success"}
