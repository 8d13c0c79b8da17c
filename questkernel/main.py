import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from questkernel.config import settings
from questkernel.kernel.errors import QuestError
from questkernel.kernel.router import router as quest_router
from questkernel.kernel.router import to_http

logging.basicConfig(level=settings.log_level)

app = FastAPI(title="QuestKernel", version="0.1.0")
app.include_router(quest_router)


@app.exception_handler(QuestError)
async def quest_error_handler(request: Request, exc: QuestError) -> JSONResponse:
    # Errors raised from dependencies, outside the route bodies
    http_exc = to_http(exc)
    return JSONResponse(
        status_code=http_exc.status_code,
        content={"detail": http_exc.detail},
        headers=http_exc.headers,
    )


@app.get("/")
async def root() -> dict:
    return {
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "quest": {
            "goals": "/quest/goals",
            "goal_events": "/quest/goals/{name}/events",
            "goal_types": "/quest/goal-types",
            "score": "/quest/score",
        },
    }


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
