from typing import Any

from dishka import FromDishka
from dishka.integrations.fastapi import DishkaRoute
from fastapi import APIRouter, Body, HTTPException
from starlette.responses import JSONResponse

from .schemas import FieldsErrorSchema, FieldsSchema
from .services import PartialJsonFields, PartialJsonResultExecutor

router = APIRouter(prefix='/partial', route_class=DishkaRoute)


@router.post('/project')
async def project_document(
    executor: FromDishka[PartialJsonResultExecutor],
    fields: FromDishka[PartialJsonFields],
    document: Any = Body(..., description='JSON-документ, из которого выбираются поля'),
) -> JSONResponse:
    return executor.execute(document, fields.get_fields_result())


@router.get('/fields', response_model=FieldsSchema)
async def describe_fields(
    fields: FromDishka[PartialJsonFields],
) -> FieldsSchema:
    result = fields.get_fields_result()
    if result.is_error:
        error = FieldsErrorSchema(
            message=result.error.message, position=result.error.position
        )
        raise HTTPException(status_code=400, detail=error.model_dump())
    if not result.is_present:
        return FieldsSchema(present=False)
    return FieldsSchema(
        present=True,
        fields=result.fields.format(),
        tree=result.fields.to_dict(),
    )
