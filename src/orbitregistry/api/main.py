import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from orbitregistry.api.chains import router as chains_router
from orbitregistry.api.custom_chains import router as custom_chains_router
from orbitregistry.container import Container
from orbitregistry.db.session import init_db
from orbitregistry.exceptions import ChainCycleError, ParentChainNotFoundError

logger = logging.getLogger("orbitregistry.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = Container()
    app.state.container = container
    init_db(container.engine())
    if container.settings().register_local_network:
        result = container.registrar().register_local()
        if not result.ok:
            logger.warning("Local network only partially registered: %s", result.error)
    yield
    container.engine().dispose()


app = FastAPI(title="Orbit Registry", version="0.1.0", lifespan=lifespan)


@app.exception_handler(ParentChainNotFoundError)
@app.exception_handler(ChainCycleError)
async def hierarchy_error_handler(request: Request, exc: Exception):
    return JSONResponse(status_code=409, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
    logger.error("Unhandled error on %s %s:\n%s", request.method, request.url.path, "".join(tb))
    return JSONResponse(status_code=500, content={"detail": str(exc)})


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chains_router)
app.include_router(custom_chains_router)


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": "0.1.0"}
