from enum import Enum


class SourceKey(Enum):
    """The two tracked spreadsheets. The value is the persisted key."""

    SOURCE_A = "SIMULADOR"
    SOURCE_B = "INDICACAO"

    @property
    def title(self) -> str:
        return _TITLES[self]


_TITLES = {
    SourceKey.SOURCE_A: "SIMULADOR",
    SourceKey.SOURCE_B: "INDICAÇÃO",
}
