from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from src.config import Settings, settings
from src.bookings import router as bookings_router
from src.utils.logger import get_logger

logger = get_logger(__name__)

def create_app(app_settings: Settings = settings) -> FastAPI:
    """Build the API application"""
    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        version="1.0.0",
        description="Event hotel booking API",
        debug=app_settings.DEBUG,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(
        bookings_router,
        prefix=f"{app_settings.API_PREFIX}/booking",
        tags=["Hotel Booking"]
    )

    @app.get("/")
    def root():
        """Root endpoint"""
        return {
            "message": app_settings.PROJECT_NAME,
            "version": "1.0.0",
            "docs": "/docs"
        }

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "healthy"}

    logger.info("Application created for %s environment", app_settings.ENVIRONMENT)
    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
