"""Nominal marker base class for pydantic models.

`DomainModel` is the base for every pydantic model in the package so
static type checkers can tell wire/domain models apart from plain dicts.
"""

from __future__ import annotations

from pydantic import BaseModel


class DomainModel(BaseModel):
    """Nominal marker for Pydantic-based domain and API models."""

    def __repr__(self) -> str:
        """Provide a concise, one-line summary of the object."""
        class_name = self.__class__.__name__

        # Prefer a stable identifier; never include credentials
        repr_attrs = ("id", "model_id", "db")
        for attr in repr_attrs:
            if hasattr(self, attr):
                attr_value = getattr(self, attr)
                if attr_value is not None:
                    return f'<{class_name} {attr}="{attr_value}">'

        return f"<{class_name}>"
