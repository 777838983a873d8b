from dataclasses import dataclass, field

from starlette.requests import Request

from partial_json.settings import PartialJsonSettingsSchema
from .fields_parser import FieldsParser, FieldsResult


@dataclass
class PartialJsonFields:
    """Селектор полей текущего запроса, разбирается не больше одного раза."""

    request: Request
    parser: FieldsParser
    options: PartialJsonSettingsSchema
    _result: FieldsResult | None = field(init=False, default=None)

    def get_fields_result(self) -> FieldsResult:
        if self._result is None:
            value = self.request.query_params.get(self.options.fields_parameter)
            self._result = self.parser.parse_optional(value)
        return self._result
