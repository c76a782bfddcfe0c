"""
Base commune des schémas : attributs snake_case côté Python,
clés camelCase dans le JSON (rollNumber, counselorId, createdAt...).
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
