import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roster.core import config
from roster.database import Database
from roster.exception_handlers import setup_exception_handlers
from roster.routes import auth_routes, health_routes, student_routes

logger = logging.getLogger(__name__)


def create_app(database: Database | None = None) -> FastAPI:
    config.validate_runtime_config()

    app = FastAPI(title='Student Roster API')
    app.state.database = database or Database(config.DATABASE_URL, echo=config.DATABASE_ECHO)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )
    setup_exception_handlers(app)

    @app.on_event('startup')
    def initialize_database() -> None:
        app.state.database.create_schema()

    @app.on_event('shutdown')
    def close_database() -> None:
        app.state.database.dispose()

    app.include_router(health_routes.router, prefix='/api')
    app.include_router(auth_routes.router, prefix='/api/auth')
    app.include_router(student_routes.router, prefix='/api/students')
    return app


app = create_app()


def run() -> None:
    config.configure_logging()
    logger.info('Server running on http://%s:%s', config.HOST, config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == '__main__':
    run()
