import logging
from dataclasses import dataclass
from typing import Any

from fastapi import HTTPException
from starlette.responses import JSONResponse

from partial_json.exceptions import ConfigurationError
from partial_json.settings import PartialJsonSettingsSchema
from .fields_parser import FieldsResult
from .partial_serializer import PartialJsonSerializer
from .selection_matcher import SelectionMatcher

logger = logging.getLogger(__name__)


@dataclass
class PartialJsonResultExecutor:
    options: PartialJsonSettingsSchema
    serializer: PartialJsonSerializer

    def __post_init__(self) -> None:
        if self.options is None:
            raise ConfigurationError('options are required')
        if self.serializer is None:
            raise ConfigurationError('serializer is required')

    def execute(
        self,
        value: Any,
        fields: FieldsResult,
        status_code: int = 200,
    ) -> JSONResponse:
        if fields is None:
            raise ConfigurationError('fields result is required')

        if fields.is_error and not self.options.ignore_parse_errors:
            logger.info('Rejecting request with invalid fields selector: %s', fields.error)
            raise HTTPException(
                status_code=400,
                detail={
                    'message': fields.error.message,
                    'position': fields.error.position,
                },
            )

        predicate = None
        if fields.is_present and not fields.is_error and not fields.fields.is_empty:
            predicate = SelectionMatcher.predicate(
                fields.fields, ignore_case=self.options.ignore_case
            )

        logger.debug(
            'Executing partial JSON result, fields=%r',
            fields.fields.format() if predicate is not None else None,
        )
        content = self.serializer.serialize(value, predicate)
        return JSONResponse(content=content, status_code=status_code)
