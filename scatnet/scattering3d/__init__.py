from .frontend.entry import RotoTranslationScatteringEntry

__all__ = ['RotoTranslationScatteringEntry']
