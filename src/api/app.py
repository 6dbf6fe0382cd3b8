from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code} {exc.base_error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
    from src.app.use_cases.authorization import ProvisionRolesUseCase
    from src.depends import AsyncSessionLocal, init_db

    await init_db()
    async with AsyncSessionLocal() as session:
        await ProvisionRolesUseCase(SqlAlchemyUnitOfWork(session)).execute()
    yield


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title="Invoicing API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import (
        admin,
        auth,
        businesses,
        clients,
        health_check,
        invitation,
        invoices,
        roles,
        team,
    )

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(roles.router, prefix=prefix, tags=["Roles"])
    app.include_router(businesses.router, prefix=prefix, tags=["Businesses"])
    app.include_router(team.router, prefix=prefix, tags=["Team"])
    app.include_router(invitation.router, prefix=prefix, tags=["Invitations"])
    app.include_router(clients.router, prefix=prefix, tags=["Clients"])
    app.include_router(invoices.router, prefix=prefix, tags=["Invoices"])
    app.include_router(admin.router, prefix=prefix, tags=["Admin"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
