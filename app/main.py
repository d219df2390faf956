"""
app/main.py

Purpose: Application entry point

- Initializes FastAPI app
- Loads configuration and logging
- Builds the code store, provider client and token verifier
- Registers API routes
- Manages application lifecycle (startup/shutdown)
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import time

from app.core.config import settings, validate_settings
from app.core.errors import add_exception_handlers
from app.core.logging import setup_logging, get_logger
from app.core.security import JWTTokenVerifier, TokenVerifier
from app.services.code_store import InMemoryVerificationCodeStore, VerificationCodeStore
from app.services.message_sender import MessageSender
from app.services.twilio_service import TwilioService
from app.api import auth, whatsapp
from utils.time_utils import utc_now, to_iso_timestamp

# Initialize logging first
setup_logging()
logger = get_logger(__name__)


def create_app(
    code_store: Optional[VerificationCodeStore] = None,
    message_sender: Optional[MessageSender] = None,
    token_verifier: Optional[TokenVerifier] = None,
) -> FastAPI:
    """
    Builds the application.

    Collaborators left as None are constructed from settings at startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.
        Handles startup and shutdown events.
        """
        logger.info("🚀 Starting WhatsApp verification relay...")

        try:
            logger.info("Validating configuration...")
            validate_settings()
            logger.info("✅ Configuration validated")

            # An empty store is falsy, so compare against None
            if code_store is not None:
                store = code_store
            else:
                store = InMemoryVerificationCodeStore(
                    ttl_seconds=settings.CODE_TTL_SECONDS,
                    sweep_interval_seconds=settings.SWEEP_INTERVAL_SECONDS,
                )

            if message_sender is not None:
                sender = message_sender
            else:
                sender = TwilioService.from_settings()

            if token_verifier is not None:
                verifier = token_verifier
            else:
                verifier = JWTTokenVerifier(settings.JWT_SECRET, settings.JWT_ALGORITHM)

            app.state.code_store = store
            app.state.message_sender = sender
            app.state.token_verifier = verifier

            # Started last so a failed startup leaves no sweep task behind
            await store.start()

            logger.info("🎉 Relay started successfully!")
            logger.info(f"Environment: {settings.ENVIRONMENT}")

        except Exception as e:
            logger.critical(f"Failed to start application: {str(e)}", exc_info=True)
            raise

        yield  # Application runs here

        logger.info("🛑 Shutting down relay...")

        try:
            await app.state.code_store.stop()
            await app.state.message_sender.close()
            logger.info("👋 Relay shut down successfully")

        except Exception as e:
            logger.error(f"Error during shutdown: {str(e)}", exc_info=True)

    app = FastAPI(
        title="WhatsApp Verification Relay",
        description="One-time verification codes and outbound messages over WhatsApp",
        version="1.0.0",
        lifespan=lifespan,
        debug=settings.DEBUG,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Add processing time header to all responses."""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)

        if process_time > 5.0:
            logger.warning(
                f"Slow request detected: {request.method} {request.url.path}",
                extra={"process_time": process_time}
            )

        return response

    add_exception_handlers(app)

    app.include_router(auth.router, tags=["Verification"])
    app.include_router(whatsapp.router, tags=["WhatsApp"])

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Liveness check."""
        return {"status": "ok", "timestamp": to_iso_timestamp(utc_now())}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower()
    )
