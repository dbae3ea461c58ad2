# liftlog/main.py
import time
import logging
import uuid
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from liftlog.errors import NotFoundOrUnauthorized, UnauthorizedError
from liftlog.routers.auth import router as auth_router
from liftlog.routers.workouts import router as workouts_router
from liftlog.routers.workout_exercises import router as workout_exercises_router
from liftlog.routers.sets import router as sets_router
from liftlog.routers.exercises import router as exercises_router
from liftlog.settings import get_settings
from liftlog.db import SessionLocal  # for healthz DB check

log = logging.getLogger("uvicorn")
settings = get_settings()

app = FastAPI(
    title="LiftLog API",
    openapi_tags=[
        {"name": "auth", "description": "Identity of the calling user"},
        {"name": "workouts", "description": "Workouts per calendar day"},
        {"name": "workout-exercises", "description": "Exercises placed in a workout"},
        {"name": "sets", "description": "Reps/weight per workout exercise"},
        {"name": "exercises", "description": "Shared exercise library"},
    ],
)


# CORS (relax for local dev; tighten origins in prod via env)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOW_ORIGINS.split(","),
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID", "X-Revalidate"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.exception_handler(UnauthorizedError)
async def unauthorized_handler(request: Request, exc: UnauthorizedError):
    return JSONResponse(
        status_code=401,
        content={"detail": exc.message},
        headers={"WWW-Authenticate": "Bearer"},
    )

@app.exception_handler(NotFoundOrUnauthorized)
async def not_found_handler(request: Request, exc: NotFoundOrUnauthorized):
    return JSONResponse(status_code=404, content={"detail": exc.message})

@app.exception_handler(SQLAlchemyError)
async def store_fault_handler(request: Request, exc: SQLAlchemyError):
    # no retry; the caller only sees a generic message
    log.exception("store fault on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Something went wrong. Please try again."})

@app.get("/")
def root():
    return {"ok": True, "name": "LiftLog API"}

@app.get("/ping")
def ping():
    return {"pong": True}

@app.get("/healthz")
def healthz():
    # Quick DB sanity check
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": settings.API_VERSION}

# Routers
app.include_router(auth_router)
app.include_router(workouts_router)
app.include_router(workout_exercises_router)
app.include_router(sets_router)
app.include_router(exercises_router)
