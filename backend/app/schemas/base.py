from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON наружу в camelCase, на входе принимаются оба варианта"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
