from pydantic import BaseModel, ConfigDict, Field


class ChangeSeatsRequest(BaseModel):
    model_config = ConfigDict(json_schema_extra={'examples': [{'seats': 200}]})

    seats: int = Field(..., strict=True)


class ChangeSeatsResponse(BaseModel):
    model_config = ConfigDict(json_schema_extra={'example': {'message': 'Seats updated'}})

    message: str
