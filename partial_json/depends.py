from dishka import Provider, Scope, provide

from .services import (
    FieldsParser,
    PartialJsonFields,
    PartialJsonResultExecutor,
    PartialJsonSerializer,
)
from .settings import PartialJsonSettingsSchema, settings


class PartialJsonProvider(Provider):
    scope = Scope.APP

    @provide(scope=Scope.APP)
    @staticmethod
    def get_options() -> PartialJsonSettingsSchema:
        return settings.partial_json

    @provide(scope=Scope.APP)
    def get_fields_parser(self, options: PartialJsonSettingsSchema) -> FieldsParser:
        return FieldsParser(max_depth=options.max_depth)

    @provide(scope=Scope.APP)
    @staticmethod
    def get_serializer() -> PartialJsonSerializer:
        return PartialJsonSerializer(by_alias=True)


provider = PartialJsonProvider()

# Services
provider.provide(PartialJsonResultExecutor, scope=Scope.APP)
provider.provide(PartialJsonFields, scope=Scope.REQUEST)
