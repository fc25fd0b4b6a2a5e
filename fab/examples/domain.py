"""
Example target types populated by factories.

Both are Pydantic models whose fields are all optional, so they can be
constructed empty and filled in field by field. Assigning a field the model
does not declare raises.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class Cat(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    name: Optional[str] = None
    food: Optional[str] = None


class Dog(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    name: Optional[str] = None
    age: Optional[int] = None
    weight: Optional[int] = None
    speed: Optional[Union[int, str]] = None
    cat: Optional[Cat] = None
