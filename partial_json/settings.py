from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PartialJsonSettingsSchema(BaseSettings):
    ignore_case: bool = False
    ignore_parse_errors: bool = False
    fields_parameter: str = 'fields'
    max_depth: int | None = 32
    model_config = SettingsConfigDict(
        env_prefix='PARTIAL_JSON__',
        case_sensitive=False,
        extra='ignore',
    )


class SettingsSchema(BaseSettings):
    partial_json: PartialJsonSettingsSchema = Field(
        default_factory=PartialJsonSettingsSchema
    )
    log_level: str = 'INFO'
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        env_nested_delimiter='__',
        case_sensitive=False,
        extra='ignore',
    )


settings = SettingsSchema()
