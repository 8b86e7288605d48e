# cadastro/interfaces/api/main.py
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from cadastro.infrastructure.config import get_settings
from cadastro.infrastructure.log import log
from cadastro.interfaces.api.middleware.rate_limit import RateLimitMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings = get_settings()
    log(f"API iniciada (rate limit {settings.rate_limit_per_minute}/min)")
    yield
    log("API encerrada")


app = FastAPI(
    title="Cadastro API",
    debug=get_settings().debug,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)

app.add_middleware(RateLimitMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


# Registrado por ultimo: envolve tambem as respostas 429 do rate limit
@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


from cadastro.interfaces.api.routes.funcionario_routes import router as funcionario_router  # noqa: E402
from cadastro.interfaces.api.routes.validacao_routes import router as validacao_router  # noqa: E402

app.include_router(validacao_router, prefix="/api")
app.include_router(funcionario_router, prefix="/api")
