# main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from ballot import __version__, config
from ballot.contract import Ballot
from ballot.deploy import deploy
from ballot.errors import BallotError
from ballot.routes.account_routes import account_router
from ballot.routes.election_routes import router as election_router
from ballot.routes.vote_routes import vote_router

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)


async def ballot_error_handler(request: Request, exc: BallotError):
    # the reason string reaches the client unchanged
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.reason})


def create_app(ballot: Ballot = None) -> FastAPI:
    """Build the API around a Ballot; without one, deploy a new one from configuration."""
    if ballot is None:
        ballot = deploy()

    app = FastAPI(title="Ballot - Elections and Voting API", version=__version__)
    app.state.ballot = ballot

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(BallotError, ballot_error_handler)

    app.include_router(account_router)
    app.include_router(election_router)
    app.include_router(vote_router)

    @app.get("/", tags=["Root"])
    def read_root():
        return {"message": "Welcome to the Ballot API"}

    @app.get("/owner", tags=["Root"])
    def get_owner():
        return {"owner": app.state.ballot.owner}

    @app.get("/health", tags=["Root"])
    def health_check():
        return {
            "status": "healthy",
            "storage": getattr(app.state.ballot.storage, "name", "custom"),
            "elections": app.state.ballot.election_count(),
        }

    @app.get("/favicon.ico", include_in_schema=False)
    def favicon():
        return Response(status_code=204)

    logger.info(f"API initialised for owner {ballot.owner}")
    return app


_app = None


def __getattr__(name):
    # `ballot.main:app` is built on first access, so importing create_app never touches storage
    global _app
    if name == "app":
        if _app is None:
            _app = create_app()
        return _app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
