"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobhub import __version__
from jobhub.config import settings
from jobhub.routers import appearance, finance, jobs, users

app = FastAPI(
    title="Job Hub API",
    description="Backend API for job application and finance tracking",
    version=__version__,
)

# CORS middleware to allow the frontend to call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount routers
app.include_router(jobs.router, prefix="/api")
app.include_router(finance.router, prefix="/api")
app.include_router(users.router, prefix="/api")
app.include_router(appearance.router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("jobhub.main:app", host=settings.backend_host, port=settings.backend_port)
