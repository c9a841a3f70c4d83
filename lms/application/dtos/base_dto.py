# lms/application/dtos/base_dto.py

"""
Base class for custom dtos.

This module defines CustomBaseModel, which extends Pydantic's BaseModel
with behaviour shared by every dto of the application.
"""

from pydantic import BaseModel, ConfigDict
from typing import Any, Dict


class CustomBaseModel(BaseModel):
    """
    Custom base model for every dto of the application.

    Fields declared with an alias (``from``/``to``) can also be populated
    by name, and ``model_dump`` omits fields whose value is None.
    """

    model_config = ConfigDict(populate_by_name=True)

    def model_dump(self, *args, **kwargs) -> Dict[str, Any]:
        """
        Override Pydantic's model_dump to filter out fields set to None.

        Args:
            *args: Positional arguments forwarded to the original method
            **kwargs: Keyword arguments forwarded to the original method

        Returns:
            Dict[str, Any]: Model attributes, without None values
        """
        d = super().model_dump(*args, **kwargs)
        return {k: v for k, v in d.items() if v is not None}
