from .fields import FieldsErrorSchema, FieldsSchema

__all__ = ['FieldsErrorSchema', 'FieldsSchema']
