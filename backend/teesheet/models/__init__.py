from .teetimes import Base, BookedPlayer, TeeSlot

__all__ = ["Base", "BookedPlayer", "TeeSlot"]
