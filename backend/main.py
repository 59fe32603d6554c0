from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.router import router
from config import settings
from services.errors import EmptyCatalogError

app = FastAPI(
    title="Career Compass API",
    description="Skill-based career role recommendations with 4-week learning plans",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(EmptyCatalogError)
async def empty_catalog_handler(request: Request, exc: EmptyCatalogError):
    return JSONResponse(status_code=503, content={"detail": str(exc)})


app.include_router(router)
