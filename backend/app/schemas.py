import re
from enum import Enum
from typing import Dict, List, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator


# --- Category ---
class CategoryBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    image_url: Optional[str] = None
    display_order: int = 0

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(CategoryBase):
    pass


class CategoryResponse(CategoryBase):
    model_config = ConfigDict(from_attributes=True)

    id: int


class MoveDirection(str, Enum):
    UP = "up"
    DOWN = "down"


# --- Product ---
class ProductBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    category_id: Optional[int] = None
    price: float = Field(..., ge=0)
    images: List[str] = Field(..., min_length=1, description="Image URLs, gallery order")
    description: str = ""
    specifications: Dict[str, str] = Field(default_factory=dict)

    @field_validator("images", mode="before")
    @classmethod
    def drop_blank_images(cls, v):
        if isinstance(v, list):
            return [url.strip() for url in v if isinstance(url, str) and url.strip()]
        return v

    @field_validator("specifications")
    @classmethod
    def drop_incomplete_specs(cls, v: Dict[str, str]) -> Dict[str, str]:
        # Half-filled rows from the admin form are discarded
        return {k.strip(): val.strip() for k, val in v.items() if k.strip() and val.strip()}


class ProductCreate(ProductBase):
    pass


class ProductUpdate(ProductBase):
    pass


class ProductResponse(ProductBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    images: List[str] = []
    created_at: Optional[datetime] = None


# --- Settings ---
class SettingsBase(BaseModel):
    site_name: str = Field(..., min_length=1, max_length=200)
    whatsapp_number: str = Field(..., description="Digits only, country code first")
    privacy_policy: str = ""

    @field_validator("whatsapp_number")
    @classmethod
    def digits_only(cls, v: str) -> str:
        digits = re.sub(r"\D", "", v)
        if not digits:
            raise ValueError("whatsapp_number must contain digits")
        return digits


class SettingsUpdate(SettingsBase):
    # None keeps the stored key
    imgbb_api_key: Optional[str] = None


class SettingsResponse(SettingsBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    whatsapp_number: str = ""

    @field_validator("whatsapp_number")
    @classmethod
    def digits_only(cls, v: str) -> str:
        return v


class AdminSettingsResponse(SettingsResponse):
    imgbb_api_key: Optional[str] = None


# --- Uploads ---
class ImageUploadResponse(BaseModel):
    url: str


# --- Auth ---
class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    is_active: bool = True
    is_superuser: bool = False


class Token(BaseModel):
    access_token: str
    token_type: str
