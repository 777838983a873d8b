from .fields_parser import FieldsParser, FieldsResult, Selection
from .partial_json_fields import PartialJsonFields
from .partial_serializer import PartialJsonSerializer
from .property_path_parser import PathSegment, PropertyPathParser
from .result_executor import PartialJsonResultExecutor
from .selection_matcher import SelectionMatcher

__all__ = [
    'FieldsParser',
    'FieldsResult',
    'Selection',
    'PartialJsonFields',
    'PartialJsonSerializer',
    'PathSegment',
    'PropertyPathParser',
    'PartialJsonResultExecutor',
    'SelectionMatcher',
]
