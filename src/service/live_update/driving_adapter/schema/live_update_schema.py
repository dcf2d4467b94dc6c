from pydantic import AliasChoices, BaseModel, Field


class AnnouncementCreateRequest(BaseModel):
    # Blank values are rejected by the use case, not here, so the error is a plain 400
    event: str = ''
    update: str = Field(default='', validation_alias=AliasChoices('update', 'message'))

    class Config:
        json_schema_extra = {
            'example': {
                'event': 'Seminar',
                'update': 'Starts at 5 PM',
            }
        }


class AnnouncementResponse(BaseModel):
    id: int
    event: str
    update: str

    class Config:
        json_schema_extra = {
            'example': {
                'id': 1,
                'event': 'Seminar',
                'update': 'Starts at 5 PM',
            }
        }


class AnnouncementCreateResponse(BaseModel):
    success: bool = True
    update: AnnouncementResponse
