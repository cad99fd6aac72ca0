from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import dashboard, properties, transactions
from app.db.database import init_db
from app.exceptions import StorageError
from app.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    init_db()
    logger.info("Rental portfolio API ready")
    yield


app = FastAPI(
    title="Rental Portfolio API",
    description="Gestão de imóveis alugados: contratos, receitas, despesas e alertas de vencimento",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(properties.router, prefix="/api/properties", tags=["properties"])
app.include_router(transactions.router, prefix="/api/transactions", tags=["transactions"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["dashboard"])


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    # the repository has already rolled back
    return JSONResponse(
        status_code=503,
        content={"detail": "Armazenamento indisponível. Tente novamente."},
    )


@app.get("/health")
def health_check():
    return {"status": "ok", "version": "0.1.0"}
