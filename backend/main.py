import logging
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.auth.admins import AdminDirectory
from backend.auth.gate import AuthGate
from backend.core import config
from backend.export import ProfessorExporter
from backend.repositories.professors import ProfessorRepository
from backend.routes import auth_routes, professor_routes
from backend.storage import FileStore

logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = [error.get('msg', 'Invalid request') for error in exc.errors()]
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={'detail': messages})


def create_app(data_dir: Path | str | None = None, export_dir: Path | str | None = None) -> FastAPI:
    config.validate_runtime_config()

    app = FastAPI()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[config.FRONTEND_URL],
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    store = FileStore(data_dir)
    admins = AdminDirectory(store)
    if not len(admins):
        logger.warning('No administrators loaded from %s; every login will be rejected.', store.data_dir)

    app.state.professors = ProfessorRepository(store)
    app.state.auth_gate = AuthGate(admins)
    app.state.exporter = ProfessorExporter(export_dir)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.get('/')
    def root():
        return {'status': 'Professor Admin API Running'}

    app.include_router(auth_routes.router, prefix='/api/auth')
    app.include_router(professor_routes.router, prefix='/api/professors')

    return app


app = create_app()
