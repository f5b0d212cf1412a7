"""Drawing surface backends."""

from wallet_history.charting.surfaces.pillow_surface import PillowSurface

__all__ = ["PillowSurface"]
