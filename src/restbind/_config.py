from typing import Union

from pydantic import BaseModel

from .models.enums import PathPolicy


class ServiceConfig(BaseModel):
    base_url: str
    headers: dict[str, Union[str, list[str]]] = {}
    path_policy: PathPolicy = PathPolicy.REPLACE
