"""Appearance settings router."""

from fastapi import APIRouter

from jobhub.config import AppearanceConfig, appearance_config

router = APIRouter()


@router.get("/appearance", response_model=AppearanceConfig)
def get_appearance() -> AppearanceConfig:
    """Return the appearance preferences the frontend should apply."""
    return appearance_config
