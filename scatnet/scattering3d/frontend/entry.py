from ...frontend.entry import ScatteringEntry

class RotoTranslationScatteringEntry(ScatteringEntry):
    def __init__(self, *args, **kwargs):
        super().__init__(name='roto-translation', class_name='scattering3d',
                         *args, **kwargs)


__all__ = ['RotoTranslationScatteringEntry']
