"""Shared helpers for the Pallet Tag Generator."""

from .helpers import clean_header, is_blank, stringify
from .step_timer import StepTimer

__all__ = ["clean_header", "is_blank", "stringify", "StepTimer"]
