"""Issue/PR label model."""

from pydantic import BaseModel


class Label(BaseModel):
    """Label attached to a pull request."""

    name: str
    color: str = ""
