from typing import Any, Dict
from pydantic import BaseModel, Field


class Gist(BaseModel):
    description: str = ""
    public: bool = False
    # {"name.txt": {"content": "..."}}, each file entry forwarded as-is
    files: Dict[str, Any] = Field(default_factory=dict)
