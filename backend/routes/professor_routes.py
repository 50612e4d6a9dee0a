import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import Response
from pydantic import BaseModel

from backend.auth.dependencies import get_current_admin
from backend.export import XLSX_MEDIA_TYPE, ProfessorExporter, content_disposition
from backend.models.professor import Professor, ProfessorUpdate
from backend.repositories.professors import (
    DuplicateInBatch,
    DuplicateKey,
    NotFound,
    ProfessorRepository,
)
from backend.storage import StoreWriteError

logger = logging.getLogger(__name__)

router = APIRouter(tags=['professors'], dependencies=[Depends(get_current_admin)])

PERSISTENCE_ERROR_DETAIL = 'Could not save professors. Please try again later.'


class BulkUploadResponse(BaseModel):
    message: str
    count: int


class ExportResponse(BaseModel):
    message: str
    path: str


def get_repository(request: Request) -> ProfessorRepository:
    return request.app.state.professors


def get_exporter(request: Request) -> ProfessorExporter:
    return request.app.state.exporter


def persistence_failed(exc: StoreWriteError) -> HTTPException:
    logger.error('Professor change was not persisted: %s', exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=PERSISTENCE_ERROR_DETAIL,
    )


@router.post('/create', response_model=Professor, status_code=status.HTTP_201_CREATED)
def create_professor(data: Professor, repository: ProfessorRepository = Depends(get_repository)):
    try:
        return repository.create(data)
    except DuplicateKey as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='Professor ID already exists',
        ) from exc
    except StoreWriteError as exc:
        raise persistence_failed(exc) from exc


@router.get('/all', response_model=list[Professor])
def list_professors(repository: ProfessorRepository = Depends(get_repository)):
    return repository.list_all()


@router.put('/update/{professor_id}', response_model=Professor)
def update_professor(
    professor_id: str,
    data: ProfessorUpdate,
    repository: ProfessorRepository = Depends(get_repository),
):
    try:
        return repository.update(professor_id, data)
    except NotFound as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail='Professor not found',
        ) from exc
    except StoreWriteError as exc:
        raise persistence_failed(exc) from exc


@router.delete('/delete/{professor_id}', status_code=status.HTTP_204_NO_CONTENT)
def delete_professor(professor_id: str, repository: ProfessorRepository = Depends(get_repository)):
    try:
        repository.delete(professor_id)
    except NotFound as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail='Professor not found',
        ) from exc
    except StoreWriteError as exc:
        raise persistence_failed(exc) from exc

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post('/bulk-upload', response_model=BulkUploadResponse, status_code=status.HTTP_201_CREATED)
def bulk_upload_professors(
    data: list[Professor],
    repository: ProfessorRepository = Depends(get_repository),
):
    try:
        count = repository.bulk_create(data)
    except DuplicateInBatch as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='Duplicate IDs found in upload data. No professors were added.',
        ) from exc
    except DuplicateKey as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='One or more professors have an ID that already exists. No professors were added.',
        ) from exc
    except StoreWriteError as exc:
        raise persistence_failed(exc) from exc

    return BulkUploadResponse(message='Professors uploaded successfully', count=count)


@router.get('/export', response_model=ExportResponse)
def export_professors(
    file_name: str = Query(default='professors', alias='fileName'),
    location: str = Query(default=''),
    repository: ProfessorRepository = Depends(get_repository),
    exporter: ProfessorExporter = Depends(get_exporter),
):
    professors = repository.list_all()

    if not location:
        try:
            disposition = content_disposition(file_name)
        except ValueError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

        try:
            content = exporter.to_bytes(professors)
        except OSError as exc:
            logger.exception('Excel export failed')
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail='Error exporting to Excel',
            ) from exc
        return Response(
            content=content,
            media_type=XLSX_MEDIA_TYPE,
            headers={'Content-Disposition': disposition},
        )

    try:
        path = exporter.write(professors, file_name, location)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except OSError as exc:
        logger.exception('Excel export to %r failed', location)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Error exporting to Excel',
        ) from exc

    return ExportResponse(message='File exported successfully', path=str(path))
