from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dishka.integrations.fastapi import setup_dishka as fastapi_setup_dishka
from dishka.integrations.fastapi import FastapiProvider

from .container import ContainerManager
from .depends import provider
from .router import router


def create_fastapi_app() -> FastAPI:
    app = FastAPI(title='partial-json', docs_url='/docs', openapi_url='/docs.json')

    # Настройка CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Разрешить все источники (в продакшене укажите конкретные)
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        max_age=600,  # Кешировать результаты preflight запросов на 10 минут
    )

    app.include_router(router)
    application_providers = [FastapiProvider(), provider]
    container = ContainerManager.create(application_providers)
    fastapi_setup_dishka(container, app)
    return app
