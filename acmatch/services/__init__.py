from acmatch.services.mask_service import MaskDecision, MaskService

__all__ = ["MaskDecision", "MaskService"]
