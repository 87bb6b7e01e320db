from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class MenuItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    subtitle: Optional[str] = None
    icon: Optional[str] = None
    url: Optional[str] = None
    styles: List[str] = []
    children: List["MenuItem"] = []


class Menu(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: Optional[str] = None
    items: List[MenuItem] = []
