import logging

from partial_json.bootstrap import create_fastapi_app
from partial_json.settings import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)

app = create_fastapi_app()
