"""
Form Field Model
Pydantic model for one question discovered on a Google Form page.
"""
from pydantic import BaseModel


class FormField(BaseModel):
    id: str
    label: str = ""
